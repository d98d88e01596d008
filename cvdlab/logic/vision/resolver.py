#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/logic/vision/resolver.py

import argparse
from typing import List, Tuple

from cvdlab.core import config as c
from cvdlab.core.simulation import simulate_color
from cvdlab.core.types import RGB
from .renderer import render_vision


def selected_deficiencies(args: argparse.Namespace) -> List[str]:
    """Deficiency keys requested on the command line, protanopia if none."""
    if getattr(args, "all_simulates", False):
        return list(c.SIMULATE_KEYS)
    chosen = [key for key in c.SIMULATE_KEYS if getattr(args, key, False)]
    return chosen or [c.DEFAULT_DEFICIENCY]


def resolve_vision_input(args: argparse.Namespace) -> None:
    """Simulate the base color for every selected deficiency and render it."""
    base: RGB = args.color
    results: List[Tuple[str, RGB]] = [
        (key, simulate_color(base, key)) for key in selected_deficiencies(args)
    ]
    render_vision(base, results)
