#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/shared/truecolor.py

import os
import sys


def ensure_truecolor() -> None:
    """Ensure the COLORTERM environment variable is set to truecolor."""
    if sys.platform == "win32" or color_disabled():
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"


def color_disabled() -> bool:
    """Honor the NO_COLOR convention (https://no-color.org)."""
    return bool(os.environ.get("NO_COLOR"))
