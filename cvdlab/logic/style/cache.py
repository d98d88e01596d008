#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/logic/style/cache.py

from typing import Dict, Optional

from cvdlab.core import config as c
from cvdlab.core.types import CacheEntry
from cvdlab.shared.logger import log
from .target import StyleTarget


class StyleMutationCache:
    """
    Snapshots of inline styles taken before an owner is first mutated.

    Entries are keyed by the owner's handle and created at most once between
    clears, so repeated processing never overwrites the true original. The
    only way to drop entries is restore_all(), which empties the whole cache.
    """

    def __init__(self) -> None:
        self._entries: Dict[int, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, owner: StyleTarget) -> bool:
        return owner.handle in self._entries

    def get(self, owner: StyleTarget) -> Optional[CacheEntry]:
        return self._entries.get(owner.handle)

    def process(self, owner: StyleTarget) -> bool:
        """Snapshot the owner's inline styles unless already cached. Returns True if new."""
        if owner.handle in self._entries:
            return False
        snapshot = {prop: owner.get_inline(prop) or "" for prop in c.SNAPSHOT_PROPS}
        self._entries[owner.handle] = CacheEntry(owner=owner, snapshot=snapshot)
        return True

    def restore_all(self) -> int:
        """
        Write every snapshot back to its owner, then clear the cache.
        A failing owner is logged and skipped. Returns the number restored.
        """
        entries = list(self._entries.values())
        restored = 0
        try:
            for entry in entries:
                try:
                    for prop in c.RESTORE_PROPS:
                        entry.owner.set_inline(prop, entry.snapshot.get(prop, ""))
                    restored += 1
                except Exception as e:
                    log("error", f"failed to restore styles for owner {entry.owner.handle}: {e}")
        finally:
            self._entries.clear()
        return restored
