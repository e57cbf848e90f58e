"""
Workforce Mock - Integration & Validation Tests
===============================================
"""

import sys
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from workforce_mock import main, generate, is_undefined
from workforce_mock.config import GeneratorConfig, WorkloadPolicy
from workforce_mock.validation import EmployeeDataValidator, ValidationSeverity


FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def fixed_clock():
    return FIXED_NOW


class TestMain:
    """Test the entry point"""

    def test_result_shape(self):
        result = main({"count": 15, "age": {"min": 20, "max": 50}}, rng=42, clock=fixed_clock)

        assert set(result) == {"employees", "stats"}
        assert len(result["employees"]) == 15
        assert result["stats"]["count"] == 15

    def test_stats_match_employees(self):
        result = main({"count": 40}, rng=42, clock=fixed_clock)
        workloads = [e["workload"] for e in result["employees"]]
        stats = result["stats"]

        assert stats["total_workload"] == sum(workloads)
        assert sum(stats["workload_counts"].values()) == len(workloads)
        assert set(stats["workload_counts"]) == set(workloads)
        assert stats["min_age"] <= stats["median_age"] <= stats["max_age"]

    def test_defaults(self):
        result = main(rng=1, clock=fixed_clock)
        assert len(result["employees"]) == 10

    def test_empty_run(self):
        stats = main({"count": 0}, rng=1, clock=fixed_clock)["stats"]
        assert stats["count"] == 0
        assert stats["workload_counts"] == {}
        assert is_undefined(stats["median_age"])
        assert is_undefined(stats["average_women_workload"])

    def test_include_sorted(self):
        stats = main({"count": 20}, rng=3, clock=fixed_clock, include_sorted=True)["stats"]
        ordered = [e["workload"] for e in stats["sorted_by_workload"]]
        assert ordered == sorted(ordered)
        assert len(ordered) == 20

    def test_config_object_accepted(self):
        cfg = GeneratorConfig(count=12, workload_policy=WorkloadPolicy.TENS)
        result = main(cfg, rng=3, clock=fixed_clock)
        assert {e["workload"] for e in result["employees"]} <= {10, 20, 30, 40}

    def test_reproducible(self):
        a = main({"count": 10}, rng=99, clock=fixed_clock)
        b = main({"count": 10}, rng=99, clock=fixed_clock)
        assert a == b


class TestValidator:
    """Test invariant checks on generated data"""

    def test_generated_data_passes(self):
        cfg = GeneratorConfig(count=200, min_age=20, max_age=60)
        employees = generate(cfg, rng=2024, clock=fixed_clock)

        validator = EmployeeDataValidator(cfg)
        results = validator.validate_all(employees, now=FIXED_NOW)
        summary = validator.get_summary()

        assert summary['failed'] == 0
        assert summary['warnings'] == 0
        assert any(r.name == "Distribution: Gender" for r in results)

    def test_workload_violation(self):
        cfg = GeneratorConfig(count=5)
        employees = generate(cfg, rng=1, clock=fixed_clock)
        employees[0] = replace(employees[0], workload=99)

        results = EmployeeDataValidator(cfg).validate_all(employees)
        failed = [r.name for r in results if r.severity == ValidationSeverity.FAIL]
        assert failed == ["Rule: Workload within policy"]

    def test_tens_policy_violation(self):
        cfg = GeneratorConfig(count=5, workload_policy=WorkloadPolicy.TENS)
        employees = generate(cfg, rng=1, clock=fixed_clock)
        employees[1] = replace(employees[1], workload=15)

        validator = EmployeeDataValidator(cfg)
        validator.validate_all(employees)
        assert validator.get_summary()['failed'] == 1

    def test_age_inconsistency(self):
        cfg = GeneratorConfig(count=5)
        employees = generate(cfg, rng=1, clock=fixed_clock)
        employees[2] = replace(employees[2], age=employees[2].age + 5)

        results = EmployeeDataValidator(cfg).validate_all(employees, now=FIXED_NOW)
        failed = {r.name for r in results if r.severity == ValidationSeverity.FAIL}
        assert "Rule: Age matches birth date" in failed

    def test_too_many_records(self):
        employees = generate({"count": 6}, rng=1, clock=fixed_clock)
        results = EmployeeDataValidator(GeneratorConfig(count=3)).validate_all(employees)
        assert results[0].severity == ValidationSeverity.FAIL

    def test_empty_set(self):
        validator = EmployeeDataValidator(GeneratorConfig())
        validator.validate_all([])
        assert validator.get_summary()['failed'] == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
