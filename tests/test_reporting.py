from __future__ import annotations

import pytest
from junitparser import Failure, JUnitXml

from assertkit.reporting.junit import has_failures, write_junit


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_results() -> dict:
    return {
        "icon-roundtrip": {
            "name": "icon-roundtrip",
            "all_passed": True,
            "assertion_pass_rate": 100.0,
            "weighted_score": 100.0,
            "assertions": [
                {"name": "sequence_equal[0]", "passed": True, "message": "passed", "score": 1.0, "weight": 1.0},
                {"name": "contains[1]", "passed": True, "message": "passed", "score": 1.0, "weight": 1.0},
            ],
        },
        "float-format": {
            "name": "float-format",
            "all_passed": False,
            "assertion_pass_rate": 50.0,
            "weighted_score": 50.0,
            "assertions": [
                {"name": "greater_than[0]", "passed": True, "message": "passed", "score": 1.0, "weight": 1.0},
                {
                    "name": "equal_with_variance[1]",
                    "passed": False,
                    "message": "Values differ by more than variance 0.1\nExpected:          1\nActual:          2",
                    "score": 0.0,
                    "weight": 1.0,
                },
            ],
        },
    }


def _suites(junit_path) -> dict:
    return {s.name: s for s in JUnitXml.fromfile(str(junit_path))}


# ---------------------------------------------------------------------------
# write_junit
# ---------------------------------------------------------------------------


def test_write_junit_creates_file(tmp_path, sample_results):
    junit_path = write_junit(tmp_path, sample_results)
    assert junit_path == tmp_path / "junit.xml"
    assert junit_path.exists()


def test_write_junit_one_suite_per_case(tmp_path, sample_results):
    suites = _suites(write_junit(tmp_path, sample_results))
    assert set(suites) == {"icon-roundtrip", "float-format"}
    assert suites["icon-roundtrip"].tests == 2
    assert suites["float-format"].tests == 2


def test_write_junit_properties(tmp_path, sample_results):
    suites = _suites(write_junit(tmp_path, sample_results))
    props = {p.name: p.value for p in suites["float-format"].properties()}
    assert props["weighted_score"] == "50.0"
    assert props["assertion_pass_rate"] == "50.0"


def test_write_junit_failure_carries_diagnostic(tmp_path, sample_results):
    suites = _suites(write_junit(tmp_path, sample_results))
    cases = {c.name: c for c in suites["float-format"]}

    assert cases["greater_than[0]"].is_passed
    assert cases["greater_than[0]"].classname == "float-format"

    failed = cases["equal_with_variance[1]"]
    assert not failed.is_passed
    failure = failed.result[0]
    assert isinstance(failure, Failure)
    assert failure.message == "Values differ by more than variance 0.1"
    assert "Actual:          2" in failure.text


# ---------------------------------------------------------------------------
# has_failures
# ---------------------------------------------------------------------------


def test_has_failures(tmp_path, sample_results):
    assert has_failures(write_junit(tmp_path, sample_results))


def test_has_no_failures(tmp_path, sample_results):
    del sample_results["float-format"]
    assert not has_failures(write_junit(tmp_path, sample_results))
