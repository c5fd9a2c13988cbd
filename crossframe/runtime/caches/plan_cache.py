"""Process-local cache of fitted treatment plans, keyed by plan uid.

Each entry keeps the plan's meta as well, so a cached plan can be serialized
again with its original uid and ``created_at``. Entries expire after a TTL and
the least recently used entry is evicted once ``max_entries`` is reached.
Multi-worker deployments should persist plans through an ArtifactStore.
"""

from __future__ import annotations

import time
from collections import OrderedDict
from dataclasses import dataclass
from threading import Lock
from typing import Any, Dict, Optional

from crossframe.components.encoders.plan import TreatmentPlan


@dataclass(frozen=True)
class CachedPlan:
    plan: TreatmentPlan
    meta: Dict[str, Any]
    expires_at: float


class PlanCache:
    def __init__(self, *, ttl_seconds: float = 60 * 60, max_entries: int = 64):
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._lock = Lock()
        self._entries: "OrderedDict[str, CachedPlan]" = OrderedDict()

    def put(
        self,
        uid: str,
        plan: TreatmentPlan,
        meta: Optional[Dict[str, Any]] = None,
        *,
        ttl_seconds: Optional[float] = None,
    ) -> None:
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        entry = CachedPlan(plan=plan, meta=dict(meta or {}), expires_at=time.monotonic() + ttl)
        with self._lock:
            self._entries[uid] = entry
            self._entries.move_to_end(uid)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    def entry(self, uid: str) -> Optional[CachedPlan]:
        with self._lock:
            entry = self._entries.get(uid)
            if entry is None:
                return None
            if entry.expires_at < time.monotonic():
                del self._entries[uid]
                return None
            self._entries.move_to_end(uid)
            return entry

    def get(self, uid: str) -> Optional[TreatmentPlan]:
        entry = self.entry(uid)
        return None if entry is None else entry.plan

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


plan_cache = PlanCache()
