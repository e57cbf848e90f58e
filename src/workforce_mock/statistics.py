"""
Workforce Mock - Statistics Engine
==================================

Descriptive statistics over a set of employee records.

Undefined values
----------------
Aggregates with no defined value (the average of nothing, the median of
nothing) come back as the ``UNDEFINED`` sentinel, a float NaN, instead of
raising. Check with ``is_undefined()`` before using a field as a number.
``count`` and ``total_workload`` are always defined (0 on empty input) and
``workload_counts`` is an empty dict.

Rounding
--------
Whole-number metrics (count, total, medians, min/max age) are rounded to an
integer. Averages are rounded to one decimal. Both round half away from
zero, so 2.5 -> 3 and 0.25 -> 0.3.
"""

import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from operator import attrgetter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union
import logging

import numpy as np

from .models import Employee, Gender, employees_to_frame

logger = logging.getLogger(__name__)


UNDEFINED = float("nan")

Number = Union[int, float]


def is_undefined(value) -> bool:
    """True if `value` is the undefined sentinel"""
    return isinstance(value, float) and math.isnan(value)


# ============================================================
# NUMERIC HELPERS
# ============================================================

def round_half_away(value: Number, digits: int = 0) -> Number:
    """
    Round to `digits` decimals with midpoints going away from zero.

    Works on the shortest decimal repr of the float, so 1.05 rounds to 1.1.
    Non-finite input is returned unchanged. `digits=0` gives an int.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    if digits == 0:
        return int(rounded)
    return float(rounded)


def average(values: Sequence[Number]) -> float:
    """Arithmetic mean, UNDEFINED if empty"""
    if len(values) == 0:
        return UNDEFINED
    return float(np.mean(np.asarray(values, dtype=float)))


def median(values: Sequence[Number]) -> float:
    """
    Middle value of the numerically sorted input.
    Even lengths give the mean of the two middle values; UNDEFINED if empty.
    """
    if len(values) == 0:
        return UNDEFINED
    return float(np.median(np.asarray(values, dtype=float)))


# ============================================================
# GROUPING & ORDERING
# ============================================================

def workload_breakdown(employees: Iterable[Employee]) -> Dict[int, int]:
    """Occurrences of each distinct workload value, keys ascending"""
    df = employees_to_frame(employees)
    if df.empty:
        return {}
    counts = df.groupby('workload').size()
    return {int(k): int(v) for k, v in counts.items()}


def sort_by_workload(employees: Iterable[Employee]) -> Tuple[Employee, ...]:
    """Copy sorted by ascending workload; ties keep their input order"""
    return tuple(sorted(employees, key=attrgetter('workload')))


# ============================================================
# SUMMARY
# ============================================================

@dataclass(frozen=True)
class EmployeeStatistics:
    """Aggregate metrics for one record set"""
    count: int
    total_workload: int
    average_workload: float
    average_age: float
    median_age: Number
    median_workload: Number
    min_age: Number
    max_age: Number
    average_women_workload: float
    workload_counts: Dict[int, int]
    sorted_by_workload: Optional[Tuple[Employee, ...]] = None

    def to_dict(self) -> dict:
        d = {
            'count': self.count,
            'total_workload': self.total_workload,
            'average_workload': self.average_workload,
            'average_age': self.average_age,
            'median_age': self.median_age,
            'median_workload': self.median_workload,
            'min_age': self.min_age,
            'max_age': self.max_age,
            'average_women_workload': self.average_women_workload,
            'workload_counts': dict(self.workload_counts),
        }
        if self.sorted_by_workload is not None:
            d['sorted_by_workload'] = [e.to_dict() for e in self.sorted_by_workload]
        return d


def _whole(value: float) -> Number:
    return round_half_away(value, 0)


def _decimal(value: float) -> float:
    return round_half_away(value, 1)


def summarize(employees: Iterable[Employee], include_sorted: bool = False) -> EmployeeStatistics:
    """
    Compute the summary for a record set.

    Args:
        employees: Records to aggregate, possibly empty. Not modified.
        include_sorted: Also attach the records sorted by workload

    Returns:
        EmployeeStatistics with UNDEFINED in every aggregate that needs data
    """
    employees: List[Employee] = list(employees)
    workloads = [e.workload for e in employees]
    ages = [e.age for e in employees]
    women_workloads = [e.workload for e in employees if e.gender == Gender.FEMALE]

    if not employees:
        logger.debug("Summarising empty employee set")

    stats = EmployeeStatistics(
        count=len(employees),
        total_workload=int(sum(workloads)),
        average_workload=_decimal(average(workloads)),
        average_age=_decimal(average(ages)),
        median_age=_whole(median(ages)),
        median_workload=_whole(median(workloads)),
        min_age=_whole(min(ages)) if ages else UNDEFINED,
        max_age=_whole(max(ages)) if ages else UNDEFINED,
        average_women_workload=_decimal(average(women_workloads)),
        workload_counts=workload_breakdown(employees),
        sorted_by_workload=sort_by_workload(employees) if include_sorted else None,
    )
    return stats
