from __future__ import annotations

import zlib
from typing import Optional

import numpy as np
from numpy.random import Generator, SeedSequence

# Named stream used for fold assignment
FOLDS_STREAM = "crossframe/folds"


class RngManager:
    """Named random streams derived from one root seed.

    Each name maps to its own ``SeedSequence`` (root entropy, crc32 of the
    name as spawn key), so adding a stream never shifts another. A missing
    root seed means 0: fold assignment is always repeatable.
    """

    def __init__(self, seed: Optional[int]):
        self._root = 0 if seed is None else int(seed) & 0xFFFFFFFF

    @property
    def root(self) -> int:
        return self._root

    def _sequence(self, name: str) -> SeedSequence:
        return SeedSequence(entropy=self._root, spawn_key=(zlib.crc32(name.encode("utf-8")),))

    def child_seed(self, name: str) -> int:
        """A uint32 seed for ``name`` (scikit-learn ``random_state`` compatible)."""
        return int(self._sequence(name).generate_state(1, dtype=np.uint32)[0])

    def child_generator(self, name: str) -> Generator:
        return np.random.default_rng(self._sequence(name))

    def fold_seed(self) -> int:
        return self.child_seed(FOLDS_STREAM)
