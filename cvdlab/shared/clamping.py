#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/shared/clamping.py

from typing import Iterable, Tuple

from cvdlab.core import config as c


def _clamp255(v: float) -> float:
    if v != v:
        return 0.0
    return max(c.RGB_MIN, min(c.RGB_MAX, v))


def sanitize_channel(v: float) -> int:
    """Clamp a channel to [0, 255] and round it; NaN becomes 0."""
    return int(round(_clamp255(float(v))))


def sanitize_rgb(rgb: Iterable[float]) -> Tuple[int, int, int]:
    r, g, b = rgb
    return sanitize_channel(r), sanitize_channel(g), sanitize_channel(b)
