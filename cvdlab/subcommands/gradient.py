#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/subcommands/gradient.py

import argparse
import sys

from cvdlab.core import config as c
from cvdlab.shared.logger import CvdlabArgumentParser
from cvdlab.shared.sanitizer import INPUT_HANDLERS
from cvdlab.shared.truecolor import ensure_truecolor
from cvdlab.logic.gradient.resolver import resolve_gradient_input


def get_gradient_parser() -> argparse.ArgumentParser:
    """Create argument parser for gradient command."""
    parser = CvdlabArgumentParser(
        prog="cvdlab gradient",
        description="cvdlab gradient: simulate color blindness for a css linear-gradient",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-g",
        "--gradient",
        required=True,
        type=INPUT_HANDLERS["gradient"],
        help="gradient as 'linear-gradient(<direction>, <stop>, ...)'"
    )
    parser.add_argument(
        "-cvd",
        "--deficiency",
        default=c.DEFAULT_DEFICIENCY,
        type=INPUT_HANDLERS["deficiency"],
        help=f"one of: {', '.join(c.SIMULATE_KEYS)} (default: {c.DEFAULT_DEFICIENCY})"
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="print only the simulated gradient text"
    )
    return parser


def main() -> None:
    """Main entry point for gradient command."""
    parser = get_gradient_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_gradient_input(args)


if __name__ == "__main__":
    main()
