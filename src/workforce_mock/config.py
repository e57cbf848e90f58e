"""
Workforce Mock - Configuration
==============================

Generation settings for the synthetic employee mock.

Input shapes
------------
The canonical input is nested::

    {"count": 25, "age": {"min": 20, "max": 40}}

The flat shape ``{"count": 25, "min": 20, "max": 40}`` is still accepted as a
deprecated alias. When both shapes are present the nested bounds win.

Degenerate values never raise: anything missing or unparseable falls back to
the default and is logged.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Optional
from pathlib import Path
import logging
import warnings

import yaml

logger = logging.getLogger(__name__)


DEFAULT_COUNT = 10
DEFAULT_MIN_AGE = 18.0
DEFAULT_MAX_AGE = 65.0


class WorkloadPolicy(str, Enum):
    """
    Allowed workload values.

    - RANGE: any integer in [10, 50]
    - TENS: one of 10, 20, 30, 40
    """
    RANGE = "range"
    TENS = "tens"


@dataclass
class GeneratorConfig:
    """Settings for one generation run. Bounds are normalised on creation."""
    count: int = DEFAULT_COUNT
    min_age: float = DEFAULT_MIN_AGE
    max_age: float = DEFAULT_MAX_AGE
    workload_policy: WorkloadPolicy = WorkloadPolicy.RANGE
    use_name_pool: bool = False

    def __post_init__(self):
        if self.count < 0:
            self.count = 0
        # Reversed bounds are swapped rather than rejected
        lo, hi = self.min_age, self.max_age
        self.min_age, self.max_age = min(lo, hi), max(lo, hi)

    @classmethod
    def from_dict(cls, dto: Optional[Dict[str, Any]]) -> "GeneratorConfig":
        """
        Build a config from a loosely-typed input dict.

        Args:
            dto: Nested ``{count, age: {min, max}}`` input, the flat
                ``{count, min, max}`` alias, or None for all defaults.

        Returns:
            A normalised GeneratorConfig
        """
        if not isinstance(dto, dict):
            if dto is not None:
                logger.warning(f"Ignoring non-mapping config of type {type(dto).__name__}")
            return cls()

        age = dto.get("age")
        if isinstance(age, dict):
            raw_min, raw_max = age.get("min"), age.get("max")
        else:
            raw_min, raw_max = None, None
            if "min" in dto or "max" in dto:
                warnings.warn(
                    "Flat 'min'/'max' config keys are deprecated; use {'age': {'min', 'max'}}",
                    DeprecationWarning,
                    stacklevel=2,
                )
                raw_min, raw_max = dto.get("min"), dto.get("max")

        return cls(
            count=_int_or(dto.get("count"), DEFAULT_COUNT, "count"),
            min_age=_float_or(raw_min, DEFAULT_MIN_AGE, "age.min"),
            max_age=_float_or(raw_max, DEFAULT_MAX_AGE, "age.max"),
            workload_policy=_policy_or(dto.get("workload_policy")),
            use_name_pool=_bool_or(dto.get("use_name_pool"), False),
        )

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "age": {"min": self.min_age, "max": self.max_age},
            "workload_policy": self.workload_policy.value,
            "use_name_pool": self.use_name_pool,
        }


def load_config(config_path) -> GeneratorConfig:
    """Load a GeneratorConfig from a YAML file.

    The document may hold the settings at the top level or under a
    ``generator:`` key.
    """
    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    if isinstance(data, dict) and isinstance(data.get("generator"), dict):
        data = data["generator"]

    logger.info(f"Loaded generator config from {Path(config_path).name}")
    return GeneratorConfig.from_dict(data)


# ============================================================
# COERCION HELPERS
# ============================================================

def _int_or(value: Any, default: int, name: str) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        logger.warning(f"Config '{name}'={value!r} is not a number, using {default}")
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Config '{name}'={value!r} is not an integer, using {default}")
        return default


def _float_or(value: Any, default: float, name: str) -> float:
    if value is None:
        return default
    if isinstance(value, bool):
        logger.warning(f"Config '{name}'={value!r} is not a number, using {default}")
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Config '{name}'={value!r} is not a number, using {default}")
        return default


def _bool_or(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    s = str(value).strip().lower()
    if s in {"true", "1", "yes", "y", "on"}:
        return True
    if s in {"false", "0", "no", "n", "off"}:
        return False
    return default


def _policy_or(value: Any) -> WorkloadPolicy:
    if value is None:
        return WorkloadPolicy.RANGE
    if isinstance(value, WorkloadPolicy):
        return value
    try:
        return WorkloadPolicy(str(value).strip().lower())
    except ValueError:
        logger.warning(f"Unknown workload policy {value!r}, using '{WorkloadPolicy.RANGE.value}'")
        return WorkloadPolicy.RANGE


DEFAULT_CONFIG = GeneratorConfig()
