#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/core/types.py

"""Shared value types: ColorStop, Gradient, CacheEntry."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

RGB = Tuple[int, int, int]
LMS = Tuple[float, float, float]


@dataclass(frozen=True)
class ColorStop:
    """One entry of a gradient: a color token plus an optional verbatim position."""

    color: str
    position: Optional[str] = None  # e.g. '50%' or '12px'


@dataclass(frozen=True)
class Gradient:
    """A single-layer linear gradient. Stop order is significant."""

    direction: Optional[str]  # None when the source had no direction argument
    stops: Tuple[ColorStop, ...] = ()


@dataclass(frozen=True)
class CacheEntry:
    """Inline style values of an owner captured before its first mutation."""

    owner: Any
    snapshot: Dict[str, str] = field(default_factory=dict)
