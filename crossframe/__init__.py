"""Cross-validated variable treatment.

Prefer the stable surface in :mod:`crossframe.api`:

    from crossframe.api import build_cross_frame, apply_treatments
"""

__version__ = "0.3.0"
