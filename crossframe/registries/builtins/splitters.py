"""Built-in fold assignment registrations."""

from __future__ import annotations

from typing import Optional

from crossframe.contracts.fold_configs import FoldModel
from crossframe.registries.splitters import register_splitter

from crossframe.components.splitters.splitters import (
    GroupedFoldAssigner,
    KFoldAssigner,
    StratifiedFoldAssigner,
)


@register_splitter("kfold")
def _kfold(cfg: FoldModel, seed: Optional[int]):
    return KFoldAssigner(cfg=cfg, seed=seed)


@register_splitter("stratified")
def _stratified(cfg: FoldModel, seed: Optional[int]):
    return StratifiedFoldAssigner(cfg=cfg, seed=seed)


@register_splitter("grouped")
def _grouped(cfg: FoldModel, seed: Optional[int]):
    return GroupedFoldAssigner(cfg=cfg, seed=seed)
