"""
Game settings with defaults and command-line overrides.
"""

from dataclasses import dataclass, replace
from typing import Any

from .masker import DEFAULT_REVEAL_PROBABILITY

DEFAULT_HINT_COOLDOWN_MS = 2000


@dataclass(frozen=True)
class GameConfig:
    """Tunable settings for a game session."""

    reveal_probability: float = DEFAULT_REVEAL_PROBABILITY
    hint_cooldown_ms: int = DEFAULT_HINT_COOLDOWN_MS
    seed: int | None = None

    def __post_init__(self):
        if not 0.0 <= self.reveal_probability <= 1.0:
            raise ValueError(f"reveal_probability must be in [0, 1], got {self.reveal_probability}")
        if self.hint_cooldown_ms < 0:
            raise ValueError(f"hint_cooldown_ms must be non-negative, got {self.hint_cooldown_ms}")


def merge_overrides(cfg: GameConfig, **overrides: Any) -> GameConfig:
    """Return a copy of `cfg` with every non-None override applied."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    return replace(cfg, **changes)
