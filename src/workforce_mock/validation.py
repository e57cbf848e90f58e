"""
Workforce Mock - Validation Module
==================================
Checks a generated record set against the config that produced it.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence
from dataclasses import dataclass
from enum import Enum

import pandas as pd

from .config import GeneratorConfig, WorkloadPolicy
from .generator import YEAR_MS, WORKLOAD_MIN, WORKLOAD_MAX, WORKLOAD_TENS
from .models import Employee, Gender, employees_to_frame

# Ages are stored to one decimal
AGE_TOLERANCE = 0.1


class ValidationSeverity(Enum):
    PASS = "PASS"
    WARNING = "WARNING"
    FAIL = "FAIL"
    INFO = "INFO"


@dataclass
class ValidationResult:
    name: str
    severity: ValidationSeverity
    message: str
    expected: Optional[str] = None
    actual: Optional[str] = None


class EmployeeDataValidator:
    """Invariant checks for synthetic employee data"""

    def __init__(self, config: GeneratorConfig):
        self.config = config
        self.results: List[ValidationResult] = []

    def validate_all(self, employees: Sequence[Employee], now: Optional[datetime] = None) -> List[ValidationResult]:
        self.results = []
        df = employees_to_frame(employees)
        self._validate_count(df)
        self._validate_ages(df)
        self._validate_workloads(df)
        self._validate_gender(df)
        if now is not None:
            self._validate_age_consistency(df, now)
        return self.results

    def _validate_count(self, df):
        n = len(df)
        self.results.append(ValidationResult(
            name="Count: records",
            severity=ValidationSeverity.PASS if n <= self.config.count else ValidationSeverity.FAIL,
            message=f"{n} records",
            expected=f"<= {self.config.count}",
            actual=str(n)
        ))

    def _validate_ages(self, df):
        cfg = self.config
        low = cfg.min_age - AGE_TOLERANCE
        high = cfg.max_age + AGE_TOLERANCE
        invalid = int((~df['age'].between(low, high)).sum())
        self.results.append(ValidationResult(
            name="Rule: Age within bounds",
            severity=ValidationSeverity.PASS if invalid == 0 else ValidationSeverity.FAIL,
            message=f"{invalid} violations",
            expected=f"[{cfg.min_age}, {cfg.max_age}]"
        ))

    def _validate_workloads(self, df):
        if self.config.workload_policy == WorkloadPolicy.TENS:
            ok = df['workload'].isin(WORKLOAD_TENS)
            expected = str(set(WORKLOAD_TENS))
        else:
            ok = df['workload'].between(WORKLOAD_MIN, WORKLOAD_MAX)
            expected = f"[{WORKLOAD_MIN}, {WORKLOAD_MAX}]"
        invalid = int((~ok).sum())
        self.results.append(ValidationResult(
            name="Rule: Workload within policy",
            severity=ValidationSeverity.PASS if invalid == 0 else ValidationSeverity.FAIL,
            message=f"{invalid} violations",
            expected=expected
        ))

    def _validate_gender(self, df):
        allowed = {g.value for g in Gender}
        invalid = int((~df['gender'].astype(object).isin(allowed)).sum())
        self.results.append(ValidationResult(
            name="Rule: Gender values",
            severity=ValidationSeverity.PASS if invalid == 0 else ValidationSeverity.FAIL,
            message=f"{invalid} violations"
        ))

        # Balance is only meaningful on larger sets
        if len(df) < 100:
            return
        female_rate = (df['gender'] == Gender.FEMALE.value).mean()
        self.results.append(ValidationResult(
            name="Distribution: Gender",
            severity=ValidationSeverity.PASS if abs(female_rate - 0.5) <= 0.15 else ValidationSeverity.WARNING,
            message=f"Female: {female_rate:.1%}",
            expected="50.0%"
        ))

    def _validate_age_consistency(self, df, now: datetime):
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        derived = (pd.Timestamp(now) - df['birth_date']).dt.total_seconds() * 1000 / YEAR_MS
        invalid = int(((derived - df['age']).abs() > AGE_TOLERANCE).sum())
        self.results.append(ValidationResult(
            name="Rule: Age matches birth date",
            severity=ValidationSeverity.PASS if invalid == 0 else ValidationSeverity.FAIL,
            message=f"{invalid} violations"
        ))

    def get_summary(self) -> Dict:
        return {
            'total': len(self.results),
            'passed': sum(1 for r in self.results if r.severity == ValidationSeverity.PASS),
            'warnings': sum(1 for r in self.results if r.severity == ValidationSeverity.WARNING),
            'failed': sum(1 for r in self.results if r.severity == ValidationSeverity.FAIL)
        }
