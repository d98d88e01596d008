#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/shared/sanitizer.py

import argparse
import re

from cvdlab.core import config as c
from .parser import parse_color, parse_gradient


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_alpha_only(value: str) -> str:
    """
    Extracts only alphabetical characters from a string, lowercasing them.
    Useful for cleaning up deficiency names typed with stray punctuation.
    """
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z]", s))


# Short preview labels are accepted as aliases ('protan' -> 'protanopia')
_DEFICIENCY_ALIASES = {label: key for key, label in c.SIMULATE_LABELS.items()}


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_deficiency(v: str) -> str:
    """Validator for deficiency names, returning the canonical key."""
    cleaned = _extract_alpha_only(v)
    cleaned = _DEFICIENCY_ALIASES.get(cleaned, cleaned)
    if cleaned not in c.SIMULATE_KEYS:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(
            f"invalid deficiency: '{raw}' (choose from {', '.join(c.SIMULATE_KEYS)})"
        )
    return cleaned


def handle_css_color(v: str):
    """Validator for 'rgb(r, g, b)' / 'rgba(r, g, b, a)' arguments."""
    rgb = parse_color(v)
    if rgb is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid css color: '{raw}'")
    return rgb


def handle_gradient(v: str):
    """Validator for single-layer 'linear-gradient(...)' arguments."""
    gradient = parse_gradient(v)
    if gradient is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid linear gradient: '{raw}'")
    return gradient


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "deficiency": handle_deficiency,
    "css_color": handle_css_color,
    "gradient": handle_gradient,
}
