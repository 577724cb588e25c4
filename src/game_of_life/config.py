"""Run settings loaded from a TOML file, with command-line overrides.

Example ``life_config.toml``::

    [grid]
    rows = 20
    cols = 40
    density = 0.3
    seed = 42

    [run]
    generations = 50
    pattern = "glider"

    [output]
    log_level = "INFO"
    log_file = "life.log"
"""

import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path

from loguru import logger


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    rows: int = 20
    cols: int = 40
    generations: int = 10
    seed: int = 42
    density: float = 0.5
    pattern: str | None = None
    log_level: str = "INFO"
    log_file: str | None = None

    def validate(self) -> "Settings":
        if self.rows < 1 or self.cols < 1:
            raise ConfigError(f"Grid must be at least 1×1, got {self.rows}×{self.cols}")
        if self.generations < 0:
            raise ConfigError(f"generations must be non-negative, got {self.generations}")
        if not 0.0 <= self.density <= 1.0:
            raise ConfigError(f"density must be within [0, 1], got {self.density}")
        try:
            logger.level(self.log_level)
        except (TypeError, ValueError):
            raise ConfigError(f"Unknown log level: {self.log_level!r}") from None
        return self


_SECTIONS = {
    "grid": ("rows", "cols", "density", "seed"),
    "run": ("generations", "pattern"),
    "output": ("log_level", "log_file"),
}


def _read_toml(path: Path) -> dict:
    if not path.exists():
        raise ConfigError(f"{path} not found")
    try:
        with open(path, "rb") as f:
            cfg = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path} is not valid TOML: {e}") from e

    values = {}
    for section, keys in _SECTIONS.items():
        table = cfg.get(section, {})
        for key in keys:
            if key in table:
                values[key] = table[key]
    return values


def load_settings(path: str | Path | None = None, **overrides) -> Settings:
    values = {}
    if path is not None:
        values.update(_read_toml(Path(path)))
        logger.debug(f"Loaded settings from {path}: {values}")

    known = {f.name for f in fields(Settings)}
    for key, value in overrides.items():
        if key not in known:
            raise ConfigError(f"Unknown setting: {key}")
        if value is not None:
            values[key] = value

    try:
        settings = replace(Settings(), **values)
        settings = replace(
            settings,
            rows=int(settings.rows),
            cols=int(settings.cols),
            generations=int(settings.generations),
            seed=int(settings.seed),
            density=float(settings.density),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid setting value: {e}") from e
    return settings.validate()
