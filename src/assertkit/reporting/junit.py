from __future__ import annotations

from pathlib import Path
from typing import Any

from junitparser import Failure, JUnitXml, TestCase, TestSuite


def write_junit(run_dir: Path, all_results: dict[str, dict[str, Any]]) -> Path:
    """Write junit.xml from per-case results, return path.

    One test suite per case and one test case per check; failed checks carry
    their diagnostic as the failure message.
    """
    xml = JUnitXml()

    for case_name, case_result in all_results.items():
        suite = TestSuite(case_name)

        for key in ("weighted_score", "assertion_pass_rate"):
            val = case_result.get(key)
            if val is not None:
                suite.add_property(key, str(val))

        for assertion in case_result.get("assertions", []):
            case = TestCase(assertion["name"])
            case.classname = case_name
            if not assertion.get("passed", True):
                message = assertion.get("message", "")
                failure = Failure(message.splitlines()[0] if message else "")
                failure.text = message
                case.result = failure
            suite.add_testcase(case)

        # Use append (not +=) to preserve properties
        xml.append(suite)

    junit_path = run_dir / "junit.xml"
    xml.write(str(junit_path), pretty=True)
    return junit_path


def has_failures(junit_path: Path) -> bool:
    xml = JUnitXml.fromfile(str(junit_path))
    return any(suite.failures > 0 for suite in xml)
