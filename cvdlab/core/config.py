#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

RGB_MIN = 0.0                      # Lower bound of an 8-bit channel
RGB_MAX = 255.0                    # 8-bit color depth limit

# RGB to LMS Matrix, row-major (Source: bluwy/colorblind, Vienot/Brettel approximation)
RGB_TO_LMS = (
    (0.31399022, 0.63951294, 0.04649755),  # Long-wavelength (L) cone response
    (0.15537241, 0.75789446, 0.08670142),  # Medium-wavelength (M) cone response
    (0.01775239, 0.10944209, 0.87256922),  # Short-wavelength (S) cone response
)

# LMS to RGB Matrix (approximate inverse of RGB_TO_LMS, round trips lose up to 2 per channel)
LMS_TO_RGB = (
    (5.47221206, -4.6419601, 0.16963708),   # Red from L, M, S
    (-1.1252419, 2.29317094, -0.1678952),   # Green from L, M, S
    (0.02980165, -0.19318073, 1.16364789),  # Blue from L, M, S
)

# Dichromatic Simulation Matrices, applied in LMS space (Source: bluwy/colorblind)
CVD_LMS_MATRICES = {
    "protanopia": (
        (0.0, 1.05118294, -0.05116099),    # L-cone loss: L rebuilt from M and S
        (0.0, 1.0, 0.0),
        (0.0, 0.0, 1.0),
    ),
    "deuteranopia": (
        (1.0, 0.0, 0.0),
        (0.9513092, 0.0, 0.04866992),      # M-cone loss: M rebuilt from L and S
        (0.0, 0.0, 1.0),
    ),
    "tritanopia": (
        (1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (-0.86744736, 1.86727089, 0.0),    # S-cone loss: S rebuilt from L and M
    ),
}

# Monochromatic Luminance Weights, applied directly in RGB space (Source: Rec. 709 luma)
CVD_RGB_WEIGHTS = {
    "achromatopsia": (0.212656, 0.715158, 0.072186),
}

DICHROMATIC_KEYS = ("protanopia", "deuteranopia", "tritanopia")
MONOCHROMATIC_KEYS = ("achromatopsia",)
SIMULATE_KEYS = DICHROMATIC_KEYS + MONOCHROMATIC_KEYS

DEFAULT_DEFICIENCY = "protanopia"

# Short labels for terminal previews
SIMULATE_LABELS = {
    "protanopia": "protan",
    "deuteranopia": "deuter",
    "tritanopia": "tritan",
    "achromatopsia": "achroma",
}

# ==========================================
# Style Properties
# ==========================================

PROP_COLOR = "color"
PROP_BACKGROUND_COLOR = "background-color"
PROP_BORDER_COLOR = "border-color"
PROP_BACKGROUND_IMAGE = "background-image"
PROP_BOX_SHADOW = "box-shadow"

# Properties whose computed value is a single solid color
SOLID_COLOR_PROPS = (PROP_COLOR, PROP_BACKGROUND_COLOR, PROP_BORDER_COLOR)

# Inline properties captured before the first mutation of an owner
SNAPSHOT_PROPS = SOLID_COLOR_PROPS + (PROP_BACKGROUND_IMAGE, PROP_BOX_SHADOW)

# Inline properties written back on restore (symmetric with the snapshot)
RESTORE_PROPS = SNAPSHOT_PROPS

# ==========================================
# CSS Syntax
# ==========================================

GRADIENT_FUNCTION = "linear-gradient"
GRADIENT_STOP_SEPARATOR = ", "
TRANSPARENT_KEYWORD = "transparent"
ANGLE_UNITS = ("deg", "rad", "grad", "turn")

# ==========================================
# ANSI Terminal Styling
# ==========================================

MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

BOLD_WHITE = "\033[1;37m"
RESET = "\033[0m"

LABEL_WIDTH = 18                   # Visible width of the label column in previews
