#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/core/conversions.py

from typing import Sequence, Tuple

from . import config as c
from cvdlab.shared.clamping import sanitize_rgb

Matrix3 = Sequence[Sequence[float]]


def multiply_matrix_vector(m: Matrix3, v: Sequence[float]) -> Tuple[float, float, float]:
    """Multiply a row-major 3x3 matrix by a 3-vector."""
    return (
        m[0][0] * v[0] + m[0][1] * v[1] + m[0][2] * v[2],
        m[1][0] * v[0] + m[1][1] * v[1] + m[1][2] * v[2],
        m[2][0] * v[0] + m[2][1] * v[1] + m[2][2] * v[2],
    )


def dot3(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def rgb_to_lms(rgb: Sequence[float]) -> Tuple[float, float, float]:
    """Convert 8-bit RGB to LMS cone responses."""
    r, g, b = rgb
    return multiply_matrix_vector(
        c.RGB_TO_LMS,
        (r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX),
    )


def lms_to_rgb(lms: Sequence[float]) -> Tuple[int, int, int]:
    """
    Convert LMS cone responses back to sanitized 8-bit RGB.

    LMS_TO_RGB is only an approximate inverse of RGB_TO_LMS, so a round trip
    through rgb_to_lms may drift by a channel value or two.
    """
    r_n, g_n, b_n = multiply_matrix_vector(c.LMS_TO_RGB, lms)
    return sanitize_rgb((r_n * c.RGB_MAX, g_n * c.RGB_MAX, b_n * c.RGB_MAX))
