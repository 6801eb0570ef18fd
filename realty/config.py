"""Configuration management for realty."""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from realty.exceptions import ConfigurationError

DEFAULT_KIND_WEIGHTS: dict[str, float] = {
    "property": 0.4,
    "apartment": 0.35,
    "condo": 0.25,
}


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class GeneratorConfig:
    """Synthetic listing generation settings."""

    count: int = 10
    locale: str = "en_US"
    kind_weights: dict[str, float] = field(default_factory=lambda: dict(DEFAULT_KIND_WEIGHTS))

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ConfigurationError(f"count must not be negative, got {self.count}")
        if not isinstance(self.kind_weights, dict):
            raise ConfigurationError("kind_weights must be a mapping of kind to weight")
        for kind, weight in self.kind_weights.items():
            if isinstance(weight, bool) or not isinstance(weight, (int, float)):
                raise ConfigurationError(f"Weight for {kind!r} must be a number, got {weight!r}")
        if not self.kind_weights or any(w < 0 for w in self.kind_weights.values()):
            raise ConfigurationError("kind_weights must be a non-empty mapping of non-negative weights")
        if sum(self.kind_weights.values()) <= 0:
            raise ConfigurationError("kind_weights must not all be zero")


@dataclass
class RealtyConfig:
    """Main configuration for realty."""

    output: OutputConfig = field(default_factory=OutputConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"
    package_log_level: str | None = None

    @classmethod
    def from_env(cls) -> "RealtyConfig":
        """Create config from environment variables."""
        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        kind_weights_str = os.getenv("KIND_WEIGHTS")
        try:
            kind_weights = json.loads(kind_weights_str) if kind_weights_str else dict(DEFAULT_KIND_WEIGHTS)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"KIND_WEIGHTS is not valid JSON: {kind_weights_str!r}") from exc
        if not isinstance(kind_weights, dict):
            raise ConfigurationError("KIND_WEIGHTS must be a JSON object")

        generator = GeneratorConfig(
            count=_int_env("LISTING_COUNT", "10"),
            locale=os.getenv("FAKER_LOCALE", "en_US"),
            kind_weights=kind_weights,
        )

        return cls(
            output=output,
            generator=generator,
            seed=_int_env("SEED") if os.getenv("SEED") else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            package_log_level=os.getenv("REALTY_LOG_LEVEL") or None,
        )


def _int_env(name: str, default: str | None = None) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
