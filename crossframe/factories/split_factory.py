from __future__ import annotations

from typing import Optional

from crossframe.components.interfaces import FoldAssigner
from crossframe.contracts.fold_configs import FoldModel
from crossframe.registries.splitters import make_splitter as _make_splitter


def make_splitter(cfg: FoldModel, seed: Optional[int] = None) -> FoldAssigner:
    """Thin wrapper around the splitter registry."""
    return _make_splitter(cfg, seed=seed)
