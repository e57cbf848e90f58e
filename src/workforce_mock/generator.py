"""
Workforce Mock - Employee Generator
===================================
Produces synthetic employee records from a GeneratorConfig.

Design Principles:
1. One "now" per run, shared by every record of that run
2. Randomness and clock are injectable for reproducible output
3. Bad timestamps are skipped, never raised
"""

import math
from datetime import datetime, timezone, timedelta
from typing import Callable, List, Optional, Union
import logging

import numpy as np

from .config import GeneratorConfig, WorkloadPolicy
from .models import Employee, Gender
from .statistics import round_half_away

logger = logging.getLogger(__name__)


# ============================================================
# CONSTANTS
# ============================================================

YEAR_MS = 365.25 * 24 * 60 * 60 * 1000

WORKLOAD_MIN = 10
WORKLOAD_MAX = 50
WORKLOAD_TENS = (10, 20, 30, 40)

FIRST_NAMES = (
    "James", "John", "Robert", "Michael", "William", "David", "Thomas", "Daniel",
    "Matthew", "Andrew", "Peter", "Lukas", "Jakub", "Martin", "Tomas", "Ondrej",
    "Mary", "Patricia", "Jennifer", "Linda", "Elizabeth", "Sarah", "Emma", "Anna",
    "Hannah", "Sofia", "Lucia", "Tereza", "Eva", "Jana", "Petra", "Klara",
)

SURNAMES = (
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Miller", "Davis", "Wilson",
    "Taylor", "Clark", "Walker", "Hall", "Novak", "Svoboda", "Dvorak", "Cerny",
    "Prochazka", "Kucera", "Vesely", "Horak", "Nemec", "Marek", "Pospisil", "Hajek",
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EmployeeGenerator:
    """
    Generator for synthetic employee records.

    Args:
        config: GeneratorConfig, a raw config dict, or None for defaults
        rng: numpy Generator or integer seed; a fresh unseeded Generator if None
        clock: Zero-argument callable returning the current datetime
    """

    def __init__(
        self,
        config: Union[GeneratorConfig, dict, None] = None,
        rng: Union[np.random.Generator, int, None] = None,
        clock: Optional[Clock] = None
    ):
        if not isinstance(config, GeneratorConfig):
            config = GeneratorConfig.from_dict(config)
        self.config = config
        if isinstance(rng, np.random.Generator):
            self.rng = rng
        else:
            self.rng = np.random.default_rng(rng)
        self.clock = clock or _utc_now

    def _now(self) -> datetime:
        now = self.clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now

    # ============================================================
    # FIELD GENERATION
    # ============================================================

    def _draw_workload(self) -> int:
        if self.config.workload_policy == WorkloadPolicy.TENS:
            return int(WORKLOAD_TENS[self.rng.integers(0, len(WORKLOAD_TENS))])
        return int(self.rng.integers(WORKLOAD_MIN, WORKLOAD_MAX + 1))

    def _draw_gender(self) -> Gender:
        return Gender.MALE if self.rng.random() < 0.5 else Gender.FEMALE

    def _draw_name(self, index: int):
        if not self.config.use_name_pool:
            return f"Employee_{index + 1}", None
        first = FIRST_NAMES[self.rng.integers(0, len(FIRST_NAMES))]
        last = SURNAMES[self.rng.integers(0, len(SURNAMES))]
        return first, last

    def generate_employee(self, index: int, now: datetime) -> Optional[Employee]:
        """
        Generate one record relative to `now`.

        Returns:
            The Employee, or None when the drawn birth timestamp is not a
            representable point in time
        """
        cfg = self.config
        now_ms = (now - _EPOCH) / timedelta(milliseconds=1)

        # Youngest allowed person has the latest birth date
        earliest_ms = now_ms - cfg.max_age * YEAR_MS
        latest_ms = now_ms - cfg.min_age * YEAR_MS
        birth_ms = earliest_ms + self.rng.random() * (latest_ms - earliest_ms)

        if not math.isfinite(birth_ms):
            logger.debug(f"Record {index + 1}: non-finite birth timestamp, skipped")
            return None
        try:
            birth_date = _EPOCH + timedelta(milliseconds=birth_ms)
        except OverflowError:
            logger.debug(f"Record {index + 1}: birth timestamp {birth_ms:.0f}ms out of range, skipped")
            return None

        age = round_half_away((now_ms - birth_ms) / YEAR_MS, 1)
        name, surname = self._draw_name(index)

        return Employee(
            name=name,
            surname=surname,
            birth_date=birth_date,
            age=age,
            workload=self._draw_workload(),
            gender=self._draw_gender(),
        )

    def generate(self) -> List[Employee]:
        """Generate up to `config.count` records in insertion order"""
        now = self._now()
        employees = []
        skipped = 0

        for i in range(self.config.count):
            employee = self.generate_employee(i, now)
            if employee is None:
                skipped += 1
                continue
            employees.append(employee)

        if skipped:
            logger.warning(f"Skipped {skipped} of {self.config.count} records with invalid birth dates")
        logger.info(f"Generated {len(employees)} employees")
        return employees


def generate(
    config: Union[GeneratorConfig, dict, None] = None,
    rng: Union[np.random.Generator, int, None] = None,
    clock: Optional[Clock] = None
) -> List[Employee]:
    """Generate synthetic employees for one run."""
    return EmployeeGenerator(config, rng=rng, clock=clock).generate()
