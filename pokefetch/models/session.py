"""
Dataclasses describing the outcome of a fetch session.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class SpriteResult:
    """The outcome of handling one sprite (front or back)."""

    side: str
    url: str
    path: Path | None = None
    size: int = 0
    error: Exception | None = None
    # "download" or "save"; the step that raised `error`
    failed_step: str | None = None

    @property
    def skipped(self) -> bool:
        return not self.url

    @property
    def saved(self) -> bool:
        return self.path is not None and self.error is None


@dataclass
class FetchStats:
    """Tracks statistics for a single fetch session."""

    sprites_saved: int = 0
    sprites_failed: int = 0
    sprites_skipped: int = 0
    total_bytes_written: int = 0
    saved_paths: list[Path] = field(default_factory=list)

    def record(self, result: SpriteResult) -> None:
        if result.skipped:
            self.sprites_skipped += 1
        elif result.saved:
            self.sprites_saved += 1
            self.total_bytes_written += result.size
            self.saved_paths.append(result.path)
        else:
            self.sprites_failed += 1
