"""Run configuration."""
from dataclasses import dataclass
from typing import Optional

from .utils.patterns import pattern_names

RENDERERS = ('curses', 'plain', 'headless')


class LifeConfigError(ValueError):
    """Raised when a run configuration cannot be used."""


@dataclass
class LifeConfig:
    width: int = 80
    height: int = 24
    delay_ms: int = 100
    # None runs until interrupted.
    generations: Optional[int] = 5000
    seed: Optional[int] = None
    pattern: Optional[str] = None
    renderer: str = 'curses'
    verbose: bool = False

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000.0

    def validate(self) -> 'LifeConfig':
        """Check every field, raising LifeConfigError on the first bad one."""
        for name in ('width', 'height', 'delay_ms'):
            value = getattr(self, name)
            if value is None or value <= 0:
                raise LifeConfigError(f"{name} must be a positive integer, got {value}")
        if self.generations is not None and self.generations <= 0:
            raise LifeConfigError(f"generations must be a positive integer, got {self.generations}")
        if self.seed is not None and self.seed < 0:
            raise LifeConfigError(f"seed must not be negative, got {self.seed}")
        if self.renderer not in RENDERERS:
            raise LifeConfigError(f"renderer must be one of {RENDERERS}, got {self.renderer!r}")
        if self.renderer == 'headless' and self.generations is None:
            raise LifeConfigError("headless runs need a generation count")
        if self.pattern is not None and self.pattern not in pattern_names():
            raise LifeConfigError(
                f"Pattern '{self.pattern}' not found. Available patterns: {pattern_names()}"
            )
        return self
