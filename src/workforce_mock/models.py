"""
Workforce Mock - Data Models & Schemas
======================================
Record types for synthetic employees and their DataFrame schema.
"""

from dataclasses import dataclass
from typing import Optional, Iterable
from enum import Enum
from datetime import datetime, timezone
import logging

import pandas as pd

logger = logging.getLogger(__name__)


# ============================================================
# ENUMERATIONS
# ============================================================

class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


# ============================================================
# DATACLASS MODELS
# ============================================================

@dataclass(frozen=True)
class Employee:
    """
    One synthetic employee record.
    `age` is derived from `birth_date` at generation time and is not set independently.
    """
    name: str
    birth_date: datetime
    age: float
    workload: int
    gender: Gender
    surname: Optional[str] = None

    @property
    def birth_date_iso(self) -> str:
        return to_iso_timestamp(self.birth_date)

    def to_dict(self) -> dict:
        d = {'name': self.name}
        if self.surname is not None:
            d['surname'] = self.surname
        d.update({
            'birth_date': self.birth_date_iso,
            'age': self.age,
            'workload': self.workload,
            'gender': self.gender.value,
        })
        return d


def to_iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision, e.g. 1990-05-17T08:30:00.000Z"""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


# ============================================================
# SCHEMA DEFINITIONS - For DataFrame views
# ============================================================

EMPLOYEE_SCHEMA = {
    'name': 'string',
    'surname': 'string',
    'birth_date': 'datetime64[ns, UTC]',
    'age': 'float64',
    'workload': 'int64',
    'gender': 'category',
}


def employees_to_frame(employees: Iterable[Employee]) -> pd.DataFrame:
    """Tabular view of a record set, one row per employee, in input order"""
    rows = [
        {
            'name': e.name,
            'surname': e.surname,
            'birth_date': e.birth_date,
            'age': e.age,
            'workload': e.workload,
            'gender': e.gender.value,
        }
        for e in employees
    ]
    df = pd.DataFrame(rows, columns=list(EMPLOYEE_SCHEMA.keys()))
    return apply_schema(df, EMPLOYEE_SCHEMA)


def apply_schema(df: pd.DataFrame, schema: dict) -> pd.DataFrame:
    """Apply schema types to a DataFrame"""
    for col, dtype in schema.items():
        if col in df.columns:
            try:
                if dtype == 'category':
                    df[col] = df[col].astype('category')
                elif dtype.startswith('datetime'):
                    df[col] = pd.to_datetime(df[col], utc=True)
                else:
                    df[col] = df[col].astype(dtype)
            except (TypeError, ValueError) as e:
                logger.warning(f"Could not convert {col} to {dtype}: {e}")
    return df
