"""Name -> implementation lookups for pluggable pieces (fold splitters).

Built-ins register themselves on first lookup; unknown names raise
:class:`~crossframe.errors.ConfigurationError` listing the known ones.
"""
