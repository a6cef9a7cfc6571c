"""Demo scene configuration, read from defaults and RASTERSHAPES_* environment variables."""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .errors import ConfigError
from .shapes import MIN_RANDOM_RADIUS, RADIUS_MARGIN

ENV_PREFIX = "RASTERSHAPES_"


def _raw(name: str, *, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    key = ENV_PREFIX + name
    value = os.getenv(key) if env is None else env.get(key)
    return None if value is None else str(value)


def _int(name: str, default: Optional[int], *, env: Optional[Mapping[str, str]] = None) -> Optional[int]:
    raw = _raw(name, env=env)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _text(name: str, default: str, *, env: Optional[Mapping[str, str]] = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return default
    value = raw.strip()
    return value if value else default


@dataclass(frozen=True)
class SceneConfig:
    width: int = 1000
    height: int = 1000
    seed: Optional[int] = None
    points: int = 1
    lines: int = 1
    circles: int = 50
    output: str = "image.png"
    background: tuple = (0, 0, 0)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "SceneConfig":
        defaults = cls()
        return cls(
            width=_int("WIDTH", defaults.width, env=env),
            height=_int("HEIGHT", defaults.height, env=env),
            seed=_int("SEED", defaults.seed, env=env),
            points=_int("POINTS", defaults.points, env=env),
            lines=_int("LINES", defaults.lines, env=env),
            circles=_int("CIRCLES", defaults.circles, env=env),
            output=_text("OUTPUT", defaults.output, env=env),
        )

    def with_overrides(self, **overrides) -> "SceneConfig":
        """Return a copy with every override that is not None applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def validate(self) -> "SceneConfig":
        """
        Check the configuration can be rendered.

        Raises:
            ConfigError: On a non positive canvas, negative shape counts, or
                circles requested on a canvas too narrow to pick a radius.
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"canvas must be at least 1x1, got {self.width}x{self.height}")
        for name in ("points", "lines", "circles"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative, got {getattr(self, name)}")
        if self.circles and self.width - RADIUS_MARGIN <= MIN_RANDOM_RADIUS:
            raise ConfigError(
                f"random circles need a canvas wider than {MIN_RANDOM_RADIUS + RADIUS_MARGIN} pixels, got {self.width}"
            )
        if not self.output:
            raise ConfigError("output path must not be empty")
        return self
