#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/subcommands/command_registry.py

from . import (
    gradient,
    style,
    vision,
)

SUBCOMMANDS = {
    'vision': vision,
    'gradient': gradient,
    'style': style,
}
