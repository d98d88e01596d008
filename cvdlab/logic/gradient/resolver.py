#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/logic/gradient/resolver.py

import argparse

from .engine import reconstruct_gradient, simulate_gradient
from .renderer import render_gradient


def resolve_gradient_input(args: argparse.Namespace) -> None:
    """Simulate a parsed gradient argument and print the rebuilt gradient."""
    simulated = simulate_gradient(args.gradient, args.deficiency)
    render_gradient(
        reconstruct_gradient(simulated),
        simulated,
        plain=getattr(args, "plain", False),
    )
