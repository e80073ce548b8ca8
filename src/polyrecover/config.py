"""Configuration loading utilities."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError
from .interpolation import available_solvers, get_solver
from .interpolation.base import Solver
from .logging import LEVELS
from .paths import project_config_path, runtime_config_dir


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.strip().upper()

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.strip().upper() not in LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        return value


class SolverConfig(BaseModel):
    method: str = Field(default="lagrange", description="Interpolation strategy: lagrange|gauss")
    workers: int = Field(default=1, ge=1, le=64, description="Threads evaluating subsets in voting mode")

    @field_validator("method")
    @classmethod
    def _validate_method(cls, value: str) -> str:
        try:
            return get_solver(value).name
        except KeyError:
            raise ValueError(f"Unknown solver '{value}', expected one of {available_solvers()}") from None

    def build_solver(self) -> Solver:
        return get_solver(self.method)


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    solver: SolverConfig = Field(default_factory=SolverConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield project_config_path()
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    if path is not None and not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ConfigError(f"Cannot parse configuration {candidate}: {exc}") from exc
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ConfigError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)
