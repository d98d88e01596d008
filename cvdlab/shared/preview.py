#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/shared/preview.py

import re
from typing import Sequence

from cvdlab.core import config as c
from .formatting import format_rgb
from .truecolor import color_disabled

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def print_color_block(rgb: Sequence[int], title: str = "color", end: str = "\n") -> None:
    """Print a labelled truecolor swatch followed by its rgb() text."""
    text = format_rgb(rgb)
    padding = " " * max(0, c.LABEL_WIDTH - get_visible_len(title))

    if color_disabled():
        print(f"{_ANSI_ESCAPE.sub('', title)}{padding}:   {text}", end=end)
        return

    r, g, b = rgb
    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   \033[48;2;{r};{g};{b}m                {c.RESET}  {c.BOLD_WHITE}{text}{c.RESET}", end=end)
