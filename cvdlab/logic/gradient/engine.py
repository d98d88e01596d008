#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/logic/gradient/engine.py

from typing import Optional

from cvdlab.core import config as c
from cvdlab.core.simulation import get_transform
from cvdlab.core.types import ColorStop, Gradient
from cvdlab.shared.formatting import format_rgb, format_stop
from cvdlab.shared.parser import parse_color, parse_gradient


def simulate_gradient(gradient: Optional[Gradient], deficiency: str) -> Optional[Gradient]:
    """Simulate every stop of a gradient, keeping direction, order and positions."""
    transform = get_transform(deficiency)
    if gradient is None:
        return None

    stops = []
    for stop in gradient.stops:
        rgb = parse_color(stop.color)
        if rgb is None:
            stops.append(stop)
            continue
        stops.append(ColorStop(color=format_rgb(transform(rgb)), position=stop.position))

    return Gradient(direction=gradient.direction, stops=tuple(stops))


def reconstruct_gradient(gradient: Optional[Gradient]) -> Optional[str]:
    """Serialize a gradient back to 'linear-gradient(...)' text."""
    if gradient is None:
        return None

    args = [format_stop(s.color, s.position) for s in gradient.stops]
    if gradient.direction:
        args.insert(0, gradient.direction)
    return f"{c.GRADIENT_FUNCTION}({c.GRADIENT_STOP_SEPARATOR.join(args)})"


def simulate_gradient_string(s: str, deficiency: str) -> Optional[str]:
    return reconstruct_gradient(simulate_gradient(parse_gradient(s), deficiency))
