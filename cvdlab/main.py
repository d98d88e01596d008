#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/main.py

import argparse
import sys

from cvdlab import __version__
from cvdlab.subcommands.command_registry import SUBCOMMANDS
from cvdlab.shared.logger import log, CvdlabArgumentParser


def get_main_parser() -> argparse.ArgumentParser:
    """Create argument parser for the top-level cvdlab command."""
    parser = CvdlabArgumentParser(
        prog="cvdlab",
        description="cvdlab: color vision deficiency simulation for css colors and styles",
        epilog=f"commands: {', '.join(SUBCOMMANDS)}",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"cvdlab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_main_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command or argument: '{args.command}'")
    else:
        log("error", f"a command is required: {', '.join(SUBCOMMANDS)}")
    log("info", "use 'cvdlab --help' for more information")
    sys.exit(2)


def main() -> None:
    """Main entry point for cvdlab CLI"""
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_main_parser()
    args = parser.parse_args()
    handle_main_command(args, parser)


if __name__ == "__main__":
    main()
