#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/logic/gradient/renderer.py

from cvdlab.core import config as c
from cvdlab.core.types import Gradient
from cvdlab.shared.parser import parse_color
from cvdlab.shared.preview import print_color_block


def render_gradient(text: str, gradient: Gradient, plain: bool = False) -> None:
    """Print the rebuilt gradient, followed by one swatch per stop."""
    if plain:
        print(text)
        return

    print()
    for i, stop in enumerate(gradient.stops):
        rgb = parse_color(stop.color)
        if rgb is None:
            continue
        position = stop.position or ""
        label = f"{c.MSG_BOLD_COLORS['info']}stop{f'{i + 1} {position}':>11}{c.RESET}"
        print_color_block(rgb, label)
    print()
    print(text)
    print()
