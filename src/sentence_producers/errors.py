"""Error types.

Configuration problems are `ValueError`s so callers that already catch
`ValueError` from the registries keep working. I/O errors are never wrapped.
"""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Unknown producer type, missing/malformed field, or unexpected key."""
