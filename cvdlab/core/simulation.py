#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/core/simulation.py

from typing import Callable, Sequence

from . import config as c
from .conversions import dot3, lms_to_rgb, multiply_matrix_vector, rgb_to_lms
from .types import RGB
from cvdlab.shared.clamping import sanitize_rgb


class InvalidDeficiencyError(ValueError):
    """Raised when a deficiency name is not one of SIMULATE_KEYS."""


def dichromatic(rgb: Sequence[float], matrix: Sequence[Sequence[float]]) -> RGB:
    """Simulate the loss of one cone type by transforming in LMS space."""
    lms = rgb_to_lms(sanitize_rgb(rgb))
    sim_lms = multiply_matrix_vector(matrix, lms)
    return sanitize_rgb(lms_to_rgb(sim_lms))


def monochromatic(rgb: Sequence[float], weights: Sequence[float]) -> RGB:
    """Collapse a color to gray using luminance weights applied in RGB space."""
    r, g, b = sanitize_rgb(rgb)
    y = dot3((r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX), weights)
    gray = y * c.RGB_MAX
    return sanitize_rgb((gray, gray, gray))


def normalize_deficiency(deficiency: str) -> str:
    """
    Return the canonical deficiency key or raise InvalidDeficiencyError.
    Matching ignores case and surrounding whitespace.
    """
    key = str(deficiency).strip().lower() if deficiency is not None else ""
    if key not in c.SIMULATE_KEYS:
        raise InvalidDeficiencyError(
            f"invalid color deficiency '{deficiency}', "
            f"expected one of: {', '.join(c.SIMULATE_KEYS)}"
        )
    return key


def get_transform(deficiency: str) -> Callable[[Sequence[float]], RGB]:
    """Resolve a deficiency name into a single-argument RGB transform."""
    key = normalize_deficiency(deficiency)
    if key in c.CVD_LMS_MATRICES:
        matrix = c.CVD_LMS_MATRICES[key]
        return lambda rgb: dichromatic(rgb, matrix)
    weights = c.CVD_RGB_WEIGHTS[key]
    return lambda rgb: monochromatic(rgb, weights)


def simulate_color(rgb: Sequence[float], deficiency: str) -> RGB:
    return get_transform(deficiency)(rgb)
