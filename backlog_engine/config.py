"""Engine tuning knobs and optional JSON configuration loading."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from backlog_engine.schema import PRIORITIES


class ConfigError(ValueError):
    """Raised when engine configuration is malformed."""


DEFAULT_PRIORITY_WEIGHTS = (("critical", 0.10), ("high", 0.25), ("medium", 0.40), ("low", 0.25))


@dataclass(frozen=True)
class EngineConfig:
    """Probabilities and ranges used by task generation and spawning."""

    tier1_threshold: float = 0.70
    tier2_threshold: float = 0.90
    same_category_bias: float = 0.5
    inherit_priority_chance: float = 0.4
    priority_weights: tuple[tuple[str, float], ...] = DEFAULT_PRIORITY_WEIGHTS
    min_spawn: int = 1
    max_spawn: int = 3
    min_due_days: int = 1
    max_due_days: int = 14
    min_extra_initial: int = 2
    max_extra_initial: int = 4
    min_match_score: int = 2
    custom_due_days: int = 7

    def __post_init__(self) -> None:
        try:
            weights = tuple(dict(self.priority_weights).items())
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"priority_weights must map priority to weight: {exc}") from exc
        object.__setattr__(self, "priority_weights", weights)
        self.validate()

    def weights(self) -> dict[str, float]:
        return dict(self.priority_weights)

    def validate(self) -> None:
        for name in ("tier1_threshold", "tier2_threshold", "same_category_bias", "inherit_priority_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must be within [0, 1], got {value}")
        if self.tier1_threshold > self.tier2_threshold:
            raise ConfigError("tier1_threshold must not exceed tier2_threshold")

        weights = self.weights()
        unknown = set(weights) - set(PRIORITIES)
        if unknown:
            raise ConfigError(f"priority_weights has unknown priorities {sorted(unknown)}")
        if any(weight < 0 for weight in weights.values()):
            raise ConfigError("priority_weights must be non-negative")
        if sum(weights.values()) <= 0:
            raise ConfigError("priority_weights must not all be zero")

        if self.min_due_days >= self.max_due_days:
            raise ConfigError("min_due_days must be less than max_due_days")
        for low, high in (
            ("min_spawn", "max_spawn"),
            ("min_extra_initial", "max_extra_initial"),
        ):
            if getattr(self, low) > getattr(self, high):
                raise ConfigError(f"{low} must not exceed {high}")
        if self.min_spawn < 1:
            raise ConfigError("min_spawn must be at least 1")
        if self.min_due_days < 1:
            raise ConfigError("min_due_days must be at least 1")
        if self.min_extra_initial < 0:
            raise ConfigError("min_extra_initial must be non-negative")
        if self.custom_due_days < 1:
            raise ConfigError("custom_due_days must be at least 1")

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "EngineConfig":
        """Build a config from a plain mapping, rejecting unknown keys."""

        if not isinstance(data, dict):
            raise ConfigError("Engine config must be a JSON object")

        known = {item.name for item in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys {unknown}")

        try:
            return cls(**data)
        except TypeError as exc:
            raise ConfigError(f"Invalid config values: {exc}") from exc

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["priority_weights"] = self.weights()
        return data


def load_config(path: str | Path | None) -> EngineConfig:
    """Load engine config from a JSON file; a missing path yields defaults."""

    if path is None:
        return EngineConfig()

    config_path = Path(path)
    if not config_path.exists():
        return EngineConfig()

    try:
        payload = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{config_path}: malformed JSON") from exc

    return EngineConfig.from_mapping(payload)
