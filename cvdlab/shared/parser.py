#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/shared/parser.py

import re
from typing import List, Optional

from cvdlab.core import config as c
from cvdlab.core.types import RGB, ColorStop, Gradient
from .clamping import sanitize_rgb

# Regex breakdown:
# rgba?\(          -> 'rgb(' or 'rgba(' (case-insensitive)
# (\d+) x3         -> integer channels separated by commas
# (\d*\.?\d+%?)?   -> optional alpha, as a fraction or a percentage
_RGB_RE = re.compile(
    r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*(\d*\.?\d+%?)\s*)?\)",
    re.IGNORECASE,
)

# A stop is '<color> <position>' where position is N% or Npx
_STOP_RE = re.compile(r"^(.+?)\s+([-+]?\d*\.?\d+(?:%|px))$", re.IGNORECASE)

# 'to right', 'to top left', or an angle such as '45deg', '-0.25turn'
_ANGLE_RE = re.compile(
    r"^[-+]?\d*\.?\d+(?:" + "|".join(c.ANGLE_UNITS) + r")$",
    re.IGNORECASE,
)


def _alpha_value(token: str) -> float:
    if token.endswith("%"):
        return float(token[:-1]) / 100.0
    return float(token)


def parse_color(s: str) -> Optional[RGB]:
    """
    Parse 'rgb(r, g, b)' or 'rgba(r, g, b, a)' into an RGB tuple.

    Returns None when no color is set: empty input, 'transparent', a fully
    transparent rgba(), or text that is not an rgb()/rgba() color. Alpha is
    otherwise discarded. Never raises.
    """
    if not s:
        return None
    text = str(s).strip()
    if text.lower() == c.TRANSPARENT_KEYWORD:
        return None

    m = _RGB_RE.search(text)
    if not m:
        return None

    alpha = m.group(4)
    if alpha is not None and _alpha_value(alpha) == 0:
        return None

    return sanitize_rgb((int(m.group(1)), int(m.group(2)), int(m.group(3))))


def split_top_level(s: str, sep: str = ",") -> List[str]:
    """
    Split on `sep` only where it is not nested inside parentheses, so that
    'rgb(1, 2, 3) 10%, red' yields two parts rather than four.
    """
    parts = []
    current = []
    depth = 0
    for ch in s:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        if ch == sep and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    parts.append("".join(current).strip())
    return parts


def _call_body(text: str, open_idx: int) -> Optional[str]:
    """Return the text between the paren at open_idx and its match, which must end `text`."""
    depth = 0
    for i in range(open_idx, len(text)):
        ch = text[i]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                if i != len(text) - 1:
                    return None
                return text[open_idx + 1:i]
    return None


def is_direction(token: str) -> bool:
    t = token.strip().lower()
    return t.startswith("to ") or bool(_ANGLE_RE.match(t))


def parse_stop(s: str) -> ColorStop:
    text = str(s).strip()
    m = _STOP_RE.match(text)
    if m:
        return ColorStop(color=m.group(1).strip(), position=m.group(2))
    return ColorStop(color=text, position=None)


def parse_gradient(s: str) -> Optional[Gradient]:
    """
    Parse a single-layer 'linear-gradient(<direction>, <stop>, ...)'.

    Returns None if the text does not contain exactly one linear gradient
    with balanced parentheses and at least one color stop.
    """
    if not s or c.GRADIENT_FUNCTION not in s:
        return None

    text = str(s).strip()
    prefix = c.GRADIENT_FUNCTION + "("
    if not text.lower().startswith(prefix):
        return None

    body = _call_body(text, len(prefix) - 1)
    if body is None:
        return None

    parts = split_top_level(body)
    if any(not p for p in parts):
        return None

    direction = None
    if is_direction(parts[0]):
        direction = parts[0]
        parts = parts[1:]

    if not parts:
        return None

    return Gradient(direction=direction, stops=tuple(parse_stop(p) for p in parts))
