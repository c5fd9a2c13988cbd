from .types import FoldAssignment, FoldSplit
from .splitters import GroupedFoldAssigner, KFoldAssigner, StratifiedFoldAssigner

__all__ = [
    "FoldAssignment",
    "FoldSplit",
    "KFoldAssigner",
    "StratifiedFoldAssigner",
    "GroupedFoldAssigner",
]
