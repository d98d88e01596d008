#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/logic/style/target.py

"""
Style-bearing objects supplied by the surrounding application.

The engine never discovers these objects itself; callers hand them over.
Each one exposes its rendered (computed) color-bearing properties for
reading, and its author-set (inline) properties for reading and writing.
"""

import itertools
from typing import Dict, Optional

_handles = itertools.count(1)


def next_handle() -> int:
    return next(_handles)


class StyleTarget:
    """
    Interface every owner passed to a SimulationSession must satisfy.

    `handle` is a stable integer identifying the owner for the lifetime of a
    session; the mutation cache is keyed on it.
    """

    handle: int

    def get_computed(self, prop: str) -> str:
        raise NotImplementedError

    def get_inline(self, prop: str) -> str:
        raise NotImplementedError

    def set_inline(self, prop: str, value: str) -> None:
        raise NotImplementedError


class DictStyleTarget(StyleTarget):
    """In-memory owner backed by two property dictionaries."""

    def __init__(
        self,
        computed: Optional[Dict[str, str]] = None,
        inline: Optional[Dict[str, str]] = None,
        handle: Optional[int] = None,
    ) -> None:
        self.computed = dict(computed or {})
        self.inline = dict(inline or {})
        self.handle = handle if handle is not None else next_handle()

    def get_computed(self, prop: str) -> str:
        return self.computed.get(prop, "")

    def get_inline(self, prop: str) -> str:
        return self.inline.get(prop, "")

    def set_inline(self, prop: str, value: str) -> None:
        if value:
            self.inline[prop] = value
        else:
            self.inline.pop(prop, None)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {"computed": dict(self.computed), "inline": dict(self.inline)}

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, str]]) -> "DictStyleTarget":
        return cls(computed=data.get("computed"), inline=data.get("inline"))

    def __repr__(self) -> str:
        return f"DictStyleTarget(handle={self.handle}, inline={self.inline!r})"
