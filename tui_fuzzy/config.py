"""YAML configuration for matching behaviour.

Example config.yaml:

    scoring:
      base: 1
      case_exact: 1
      consecutive: 3
      boundary: 2
    min_score: 0
    limit: 10
    filter_mode: fuzzy

Every section is optional; missing values fall back to the defaults.
"""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .core import DEFAULT_WEIGHTS, FilterMode, FuzzyMatcher, ScoringWeights

logger = logging.getLogger(__name__)

KNOWN_KEYS = {"scoring", "min_score", "limit", "filter_mode"}


@dataclass(frozen=True)
class FuzzyConfig:
    """Configuration for matchers built by widgets.

    Attributes:
        weights: Scoring bonuses.
        min_score: Matches scoring below this are dropped.
        limit: Maximum number of options shown, None for no limit.
        filter_mode: How typed text filters options.
    """

    weights: ScoringWeights = field(default_factory=lambda: DEFAULT_WEIGHTS)
    min_score: int = 0
    limit: Optional[int] = None
    filter_mode: FilterMode = FilterMode.FUZZY

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FuzzyConfig":
        """Build a validated config from a parsed YAML mapping.

        Raises:
            ValueError: If a value has the wrong type or range
        """
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")

        for key in sorted(set(data) - KNOWN_KEYS):
            logger.warning("Ignoring unknown config key '%s'", key)

        weights = _parse_weights(data.get("scoring") or {})

        min_score = data.get("min_score", 0)
        if not _is_int(min_score):
            raise ValueError(f"min_score must be an integer, got {min_score!r}")

        limit = data.get("limit")
        if limit is not None and (not _is_int(limit) or limit <= 0):
            raise ValueError(f"limit must be a positive integer, got {limit!r}")

        mode = data.get("filter_mode", FilterMode.FUZZY.value)
        filter_mode = FilterMode.parse(str(mode))

        return cls(weights=weights, min_score=min_score, limit=limit, filter_mode=filter_mode)

    def make_matcher(self, pattern: str) -> FuzzyMatcher:
        """Build a matcher for pattern with the configured weights and floor."""
        return FuzzyMatcher(pattern, min_score=self.min_score, weights=self.weights)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_weights(section: dict[str, Any]) -> ScoringWeights:
    """Validate the scoring section."""
    if not isinstance(section, dict):
        raise ValueError("scoring must be a mapping of bonus name to integer")

    names = {f.name for f in fields(ScoringWeights)}
    values = {}
    for name, value in section.items():
        if name not in names:
            raise ValueError(f"Unknown scoring weight '{name}'. Available: {', '.join(sorted(names))}")
        if not _is_int(value) or value < 0:
            raise ValueError(f"scoring.{name} must be a non-negative integer, got {value!r}")
        values[name] = value
    return ScoringWeights(**values)


def load_config(path: Union[str, Path, None] = None) -> FuzzyConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML file. None returns the defaults.

    Returns:
        FuzzyConfig

    Raises:
        FileNotFoundError: If path does not exist
        ValueError: If the file content is invalid
    """
    if path is None:
        return FuzzyConfig()

    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    config = FuzzyConfig.from_dict(data if data is not None else {})
    logger.info("Loaded matcher config from %s", config_path)
    return config
