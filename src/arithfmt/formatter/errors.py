"""Error types for the expression formatter."""
from __future__ import annotations

from collections.abc import Iterable


class UnknownFormatError(ValueError):
    """Raised when a render format name has no registered glyph set."""

    def __init__(self, format_name: str, available: Iterable[str]) -> None:
        self.format_name = format_name
        self.available = tuple(sorted(available))
        super().__init__(
            f"Render format {format_name!r} is not supported. "
            f"Available formats: {', '.join(self.available)}."
        )
