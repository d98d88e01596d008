#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/logic/vision/renderer.py

from typing import List, Tuple

from cvdlab.core import config as c
from cvdlab.core.types import RGB
from cvdlab.shared.preview import print_color_block


def render_vision(base: RGB, results: List[Tuple[str, RGB]]) -> None:
    print()
    print_color_block(base, f"{c.BOLD_WHITE}base color{c.RESET}")
    print()
    for key, rgb in results:
        label = f"{c.MSG_BOLD_COLORS['info']}{c.SIMULATE_LABELS[key]}{c.RESET}"
        print_color_block(rgb, label)
    print()
