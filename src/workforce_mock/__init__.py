"""
Workforce Mock
==============
Synthetic employee records and descriptive statistics over them.
"""

from .config import (
    GeneratorConfig,
    WorkloadPolicy,
    load_config
)

from .models import Employee, Gender

from .generator import EmployeeGenerator, generate

from .statistics import (
    EmployeeStatistics,
    UNDEFINED,
    average,
    is_undefined,
    median,
    summarize
)

from .main import main

__version__ = "1.0.0"
