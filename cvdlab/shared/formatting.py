#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/shared/formatting.py

from typing import Optional, Sequence

from .clamping import sanitize_rgb


def format_rgb(rgb: Sequence[float]) -> str:
    r, g, b = sanitize_rgb(rgb)
    return f"rgb({r}, {g}, {b})"


def format_stop(color: str, position: Optional[str] = None) -> str:
    return f"{color} {position}" if position else color
