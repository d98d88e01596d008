#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/subcommands/vision.py

import argparse
import sys

from cvdlab.shared.logger import CvdlabArgumentParser
from cvdlab.shared.sanitizer import INPUT_HANDLERS
from cvdlab.shared.truecolor import ensure_truecolor
from cvdlab.logic.vision.resolver import resolve_vision_input


def get_vision_parser() -> argparse.ArgumentParser:
    """Create argument parser for vision command."""
    parser = CvdlabArgumentParser(
        prog="cvdlab vision",
        description="cvdlab vision: simulate color blindness for a single color",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "-c", "--color",
        required=True,
        type=INPUT_HANDLERS["css_color"],
        help="base color as 'rgb(r, g, b)' or 'rgba(r, g, b, a)'"
    )
    simulate_group = parser.add_argument_group("simulation types")
    simulate_group.add_argument(
        '-all', '--all-simulates',
        action="store_true",
        help="show all simulation types"
    )
    simulate_group.add_argument(
        '-p', '--protanopia',
        action="store_true",
        help="simulate protanopia red-blind (default)"
    )
    simulate_group.add_argument(
        '-d', '--deuteranopia',
        action="store_true",
        help="simulate deuteranopia green-blind"
    )
    simulate_group.add_argument(
        '-t', '--tritanopia',
        action="store_true",
        help="simulate tritanopia blue-blind"
    )
    simulate_group.add_argument(
        '-a', '--achromatopsia',
        action="store_true",
        help="simulate achromatopsia total-blind"
    )
    return parser


def main() -> None:
    parser = get_vision_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_vision_input(args)


if __name__ == "__main__":
    main()
