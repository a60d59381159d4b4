"""Unit tests for salary estimate parsing."""

import logging

import pytest

from dsjobs.cleaner.salary import apply_salaries, average_salary, parse_salary_bounds


class TestParseSalaryBounds:
    """Tests for range and single-value extraction"""

    def test_range(self):
        """Test the usual range shape"""
        assert parse_salary_bounds("$137K-$171K (Glassdoor est.)") == (137000, 171000)

    def test_single_value(self):
        """Test the single-value fallback"""
        assert parse_salary_bounds("$90K (Employer est.)") == (90000, 90000)

    @pytest.mark.parametrize("salary_estimate,expected", [
        ("Employer Provided Salary:$120K-$140K", (120000, 140000)),
        ("$56K - $97K", (56000, 97000)),
        ("$75K", (75000, 75000)),
        ("$100K-$1000K (Glassdoor est.)", (100000, 1000000)),
    ])
    def test_shapes(self, salary_estimate, expected):
        """Test variants seen in the raw data"""
        assert parse_salary_bounds(salary_estimate) == expected

    def test_range_takes_precedence(self):
        """Test that a range is never read as its first single value"""
        min_salary, max_salary = parse_salary_bounds("$79K-$131K")
        assert min_salary == 79000
        assert max_salary == 131000

    @pytest.mark.parametrize("salary_estimate", [
        "-1",
        "Not listed",
        "",
        None,
        12,
    ])
    def test_unparseable(self, salary_estimate):
        """Test that text without an amount yields no bounds"""
        assert parse_salary_bounds(salary_estimate) == (None, None)

    def test_hourly_without_k_amount(self):
        """Test that digits without a K amount yield no bounds"""
        assert parse_salary_bounds("$17-$24 Per Hour (Glassdoor est.)") == (None, None)

    def test_reversed_range_is_swapped(self, caplog):
        """Test that min/max stay ordered and a warning is logged"""
        with caplog.at_level(logging.WARNING):
            assert parse_salary_bounds("$171K-$137K") == (137000, 171000)
        assert "swapping" in caplog.text


class TestAverageSalary:
    """Tests for the rounded mean"""

    def test_mean(self):
        assert average_salary(137000, 171000) == 154000

    def test_half_rounds_up(self):
        assert average_salary(1, 2) == 2

    def test_missing_bound(self):
        assert average_salary(None, 90000) is None
        assert average_salary(90000, None) is None
        assert average_salary(None, None) is None


class TestApplySalaries:
    """Tests for the salary stage"""

    def test_sets_all_fields(self):
        records = [
            {"idx": 0, "salary_estimate": "$137K-$171K (Glassdoor est.)"},
            {"idx": 1, "salary_estimate": "$90K (Employer est.)"},
            {"idx": 2, "salary_estimate": "-1"},
        ]

        parsed = apply_salaries(records)

        assert parsed == 2
        assert records[0]["min_salary"] == 137000
        assert records[0]["max_salary"] == 171000
        assert records[0]["avg_salary"] == 154000
        assert records[1]["min_salary"] == records[1]["max_salary"] == 90000
        assert records[1]["avg_salary"] == 90000
        assert records[2]["min_salary"] is None
        assert records[2]["max_salary"] is None
        assert records[2]["avg_salary"] is None

    def test_invariants(self):
        """Test min <= max and avg = round(mean) on every parsed record"""
        records = [
            {"idx": i, "salary_estimate": text}
            for i, text in enumerate([
                "$31K-$56K", "$200K-$100K", "$45K", "$99K-$101K (Employer est.)",
            ])
        ]

        apply_salaries(records)

        for record in records:
            assert record["min_salary"] <= record["max_salary"]
            assert record["avg_salary"] == average_salary(record["min_salary"], record["max_salary"])
