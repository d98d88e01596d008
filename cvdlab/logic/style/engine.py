#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: cvdlab/logic/style/engine.py

from typing import Iterable, Iterator

from cvdlab.core import config as c
from cvdlab.core.simulation import get_transform, normalize_deficiency
from cvdlab.shared.formatting import format_rgb
from cvdlab.shared.logger import log
from cvdlab.shared.parser import parse_color, parse_gradient
from cvdlab.logic.gradient.engine import reconstruct_gradient, simulate_gradient
from .cache import StyleMutationCache
from .target import StyleTarget


class SimulationSession:
    """
    One activation of a deficiency simulation over a set of owners.

    The session owns the mutation cache: it is created empty, filled as owners
    are processed, and emptied by restore().
    """

    def __init__(self, deficiency: str) -> None:
        self.deficiency = normalize_deficiency(deficiency)
        self._transform = get_transform(self.deficiency)
        self.cache = StyleMutationCache()

    def apply(self, owner: StyleTarget) -> None:
        """Simulate the owner's rendered colors and write them inline."""
        self.cache.process(owner)

        for prop in c.SOLID_COLOR_PROPS:
            rgb = parse_color(owner.get_computed(prop))
            if rgb is None:
                continue
            owner.set_inline(prop, format_rgb(self._transform(rgb)))

        gradient = parse_gradient(owner.get_computed(c.PROP_BACKGROUND_IMAGE))
        if gradient is not None:
            simulated = reconstruct_gradient(simulate_gradient(gradient, self.deficiency))
            owner.set_inline(c.PROP_BACKGROUND_IMAGE, simulated)

    def iter_apply(self, owners: Iterable[StyleTarget]) -> Iterator[StyleTarget]:
        """
        Lazily process owners, yielding each one once it has been handled.
        Failing owners are logged and not yielded.
        """
        for index, owner in enumerate(owners):
            try:
                self.apply(owner)
            except Exception as e:
                log("error", f"error processing owner {index}: {e}")
                continue
            yield owner

    def apply_all(self, owners: Iterable[StyleTarget]) -> int:
        """Process every owner in one synchronous pass. Returns the number processed."""
        return sum(1 for _ in self.iter_apply(owners))

    def restore(self) -> int:
        return self.cache.restore_all()
