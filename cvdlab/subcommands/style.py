#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/subcommands/style.py

import argparse
import sys

from cvdlab.core import config as c
from cvdlab.shared.logger import CvdlabArgumentParser
from cvdlab.shared.sanitizer import INPUT_HANDLERS
from cvdlab.logic.style.resolver import resolve_style_input


def get_style_parser() -> argparse.ArgumentParser:
    """Create argument parser for style command."""
    parser = CvdlabArgumentParser(
        prog="cvdlab style",
        description="cvdlab style: apply a simulation to style objects loaded from json",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-f",
        "--file",
        required=True,
        help='json array of {"computed": {...}, "inline": {...}} objects'
    )
    parser.add_argument(
        "-cvd",
        "--deficiency",
        default=c.DEFAULT_DEFICIENCY,
        type=INPUT_HANDLERS["deficiency"],
        help=f"one of: {', '.join(c.SIMULATE_KEYS)} (default: {c.DEFAULT_DEFICIENCY})"
    )
    parser.add_argument(
        "--stream",
        action="store_true",
        help="print one json line per object as it is processed"
    )
    parser.add_argument(
        "--restore",
        action="store_true",
        help="restore the original inline styles afterwards and print them"
    )
    return parser


def main() -> None:
    """Main entry point for style command."""
    parser = get_style_parser()
    args = parser.parse_args(sys.argv[1:])
    resolve_style_input(args)


if __name__ == "__main__":
    main()
