#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/logic/style/resolver.py

import argparse
import json
import sys
from typing import List

from cvdlab.shared.logger import log
from .engine import SimulationSession
from .target import DictStyleTarget


def load_targets(path: str) -> List[DictStyleTarget]:
    """Load a JSON array of {"computed": {...}, "inline": {...}} objects."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        log("error", f"cannot read '{path}': {e.strerror or e}")
        sys.exit(2)
    except json.JSONDecodeError as e:
        log("error", f"invalid JSON in '{path}': {e.msg} (line {e.lineno})")
        sys.exit(2)

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        log("error", f"'{path}' must contain a JSON array of style objects")
        sys.exit(2)

    return [DictStyleTarget.from_dict(item) for item in data]


def resolve_style_input(args: argparse.Namespace) -> None:
    """Apply a simulation session to the style objects of a JSON file."""
    targets = load_targets(args.file)
    session = SimulationSession(args.deficiency)

    if args.stream:
        for target in session.iter_apply(targets):
            print(json.dumps(target.inline, sort_keys=True))
    else:
        session.apply_all(targets)
        print(json.dumps([t.inline for t in targets], indent=2, sort_keys=True))

    if args.restore:
        session.restore()
        print(json.dumps([t.inline for t in targets], indent=2, sort_keys=True))
