"""
Workforce Mock - Entry Point
============================
Generate a record set and summarise it in one call.

Usage:
    from workforce_mock import main

    result = main({"count": 50, "age": {"min": 19, "max": 35}})
    result["employees"]   # list of record dicts
    result["stats"]       # summary dict
"""

import json
import logging
from typing import Optional, Union

import numpy as np

from .config import GeneratorConfig
from .generator import Clock, EmployeeGenerator
from .statistics import summarize

logger = logging.getLogger(__name__)


def main(
    config: Union[GeneratorConfig, dict, None] = None,
    rng: Union[np.random.Generator, int, None] = None,
    clock: Optional[Clock] = None,
    include_sorted: bool = False
) -> dict:
    """
    Generate employees and compute their statistics.

    Args:
        config: ``{"count": n, "age": {"min": a, "max": b}}``, a
            GeneratorConfig, or None for defaults
        rng: numpy Generator or seed
        clock: Callable returning the current datetime
        include_sorted: Add ``sorted_by_workload`` to the stats

    Returns:
        ``{"employees": [...], "stats": {...}}``
    """
    generator = EmployeeGenerator(config, rng=rng, clock=clock)
    employees = generator.generate()
    stats = summarize(employees, include_sorted=include_sorted)
    logger.info(f"Summarised {stats.count} employees, total workload {stats.total_workload}")
    return {
        "employees": [e.to_dict() for e in employees],
        "stats": stats.to_dict(),
    }


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    result = main({"count": 10, "age": {"min": 18, "max": 65}}, rng=42)
    print(json.dumps(result["stats"], indent=2))
