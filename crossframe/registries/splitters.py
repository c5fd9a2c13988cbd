from __future__ import annotations

from typing import Callable, Optional

from crossframe.components.interfaces import FoldAssigner
from crossframe.contracts.fold_configs import FoldModel
from crossframe.registries.base import Registry

SplitterFactory = Callable[[FoldModel, Optional[int]], FoldAssigner]

_SPLITTERS: Registry[SplitterFactory] = Registry("fold mode")


def register_splitter(mode: str) -> Callable[[SplitterFactory], SplitterFactory]:
    return _SPLITTERS.register(mode)


def _load_builtins() -> None:
    # registration happens on import; later imports are no-ops
    from crossframe.registries.builtins import splitters as _  # noqa: F401


def make_splitter(cfg: FoldModel, *, seed: Optional[int] = None) -> FoldAssigner:
    """Build the fold assigner registered for ``cfg.mode``."""
    _load_builtins()
    return _SPLITTERS.lookup(cfg.mode)(cfg, seed)


def list_fold_modes() -> list[str]:
    _load_builtins()
    return _SPLITTERS.names()
