"""Backend-only exception types.

Service code stays HTTP-agnostic; routers map these to HTTP responses.
"""

from __future__ import annotations


class PlanCacheGoneError(Exception):
    """Raised when a plan uid is unknown to, or expired from, the runtime cache."""
