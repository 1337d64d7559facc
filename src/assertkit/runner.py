from __future__ import annotations

import json
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from assertkit.assertions.base import AssertionResult
from assertkit.assertions.dispatch import check_type, evaluate_check
from assertkit.config import CaseConfig, SuiteConfig
from assertkit.culture import culture_scope
from assertkit.reporting.junit import write_junit
from assertkit.runtime import current_variant
from assertkit.verbose import close_logger, setup_logger


@dataclass
class CaseResult:
    name: str
    assertions: list[AssertionResult]
    all_passed: bool
    assertion_pass_rate: float
    weighted_score: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def compute_weighted_score(results: list[AssertionResult]) -> float:
    """Weighted percentage of passed checks, 0.0-100.0."""
    total_weight = sum(r.weight for r in results)
    if total_weight <= 0:
        return 0.0
    return round(sum(r.score * r.weight for r in results) / total_weight * 100, 2)


class Runner:
    """Runs the cases of a check suite and writes the results."""

    def __init__(
        self,
        config: SuiteConfig,
        output_dir: Path,
        case_filter: str | None = None,
        verbose: bool = False,
        parallel: int = 1,
    ):
        self.config = config
        self.output_dir = output_dir
        self.case_filter = case_filter
        self.verbose = verbose
        self.parallel = parallel
        self.results: dict[str, CaseResult] = {}

    @property
    def all_passed(self) -> bool:
        return all(r.all_passed for r in self.results.values())

    def execute(self) -> Path:
        """Run all selected cases. Returns the run directory."""
        cases = self.config.cases
        if self.case_filter:
            cases = [c for c in cases if c.name == self.case_filter]
            if not cases:
                raise ValueError(f"No case named '{self.case_filter}'")

        run_id = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H%M%S")
        run_dir = self.output_dir / run_id
        run_dir.mkdir(parents=True, exist_ok=True)

        logger = setup_logger(
            run_dir / "debug.log", verbose=self.verbose, logger_name=f"assertkit_run_{id(self)}"
        )
        try:
            variant = current_variant()
            culture = self.config.resolved_culture()
            logger.debug(f"Starting run of {len(cases)} case(s), variant={variant.value}, culture={culture}")

            with ThreadPoolExecutor(max_workers=self.parallel) as executor:
                future_to_case = {
                    executor.submit(self._run_case, case, logger): case.name for case in cases
                }
                finished: dict[str, CaseResult] = {}
                for future in as_completed(future_to_case):
                    case_name = future_to_case[future]
                    result = future.result()
                    finished[case_name] = result
                    status = "PASS" if result.all_passed else "FAIL"
                    n_passed = sum(1 for a in result.assertions if a.passed)
                    print(f"  {status} {case_name} ({n_passed}/{len(result.assertions)} checks)")

            # Keep config order regardless of completion order
            self.results = {c.name: finished[c.name] for c in cases}

            (run_dir / "results.json").write_text(
                json.dumps({k: v.to_dict() for k, v in self.results.items()}, indent=2)
            )
            (run_dir / "meta.yaml").write_text(
                yaml.safe_dump(
                    {
                        "run_id": run_id,
                        "variant": variant.value,
                        "culture": culture.name,
                        "cases": len(cases),
                    }
                )
            )
            write_junit(run_dir, {k: v.to_dict() for k, v in self.results.items()})
            logger.debug(f"Run finished, all_passed={self.all_passed}")
        finally:
            close_logger(logger)

        return run_dir

    def _run_case(self, case: CaseConfig, logger: logging.Logger) -> CaseResult:
        logger.info(f"Running case {case.name}")
        with culture_scope(self.config.resolved_culture()):
            results = [
                evaluate_check(check, name=f"{check_type(check)}[{i}]", logger=logger)
                for i, check in enumerate(case.checks)
            ]
        n_passed = sum(1 for r in results if r.passed)
        return CaseResult(
            name=case.name,
            assertions=results,
            all_passed=n_passed == len(results),
            assertion_pass_rate=round(n_passed / len(results) * 100, 2),
            weighted_score=compute_weighted_score(results),
        )
