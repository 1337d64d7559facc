"""Test logger isolation to prevent debug.log mixing between runs."""

from __future__ import annotations

from pathlib import Path

import pytest

from assertkit.verbose import close_logger, setup_logger


def test_unique_logger_names_create_separate_instances(tmp_path: Path):
    """Test that different logger names create independent logger instances."""
    log1 = tmp_path / "run1.log"
    log2 = tmp_path / "run2.log"

    logger1 = setup_logger(log1, verbose=False, logger_name="assertkit_run_1")
    logger2 = setup_logger(log2, verbose=False, logger_name="assertkit_run_2")

    assert logger1 is not logger2
    assert logger1.name != logger2.name

    logger1.debug("Message from run1")
    logger2.debug("Message from run2")

    log1_content = log1.read_text()
    log2_content = log2.read_text()

    assert "Message from run1" in log1_content
    assert "Message from run2" not in log1_content

    assert "Message from run2" in log2_content
    assert "Message from run1" not in log2_content


def test_same_logger_name_raises_error(tmp_path: Path):
    """Test that reusing the same logger name raises RuntimeError."""
    logger1 = setup_logger(tmp_path / "log1.log", verbose=False, logger_name="assertkit_shared_test")
    logger1.debug("First message")

    with pytest.raises(RuntimeError) as exc_info:
        setup_logger(tmp_path / "log2.log", verbose=False, logger_name="assertkit_shared_test")

    error_msg = str(exc_info.value)
    assert "assertkit_shared_test" in error_msg
    assert "already exists" in error_msg


def test_name_is_reusable_after_close(tmp_path: Path):
    logger = setup_logger(tmp_path / "log1.log", verbose=False, logger_name="assertkit_reuse")
    close_logger(logger)

    logger = setup_logger(tmp_path / "log2.log", verbose=False, logger_name="assertkit_reuse")
    logger.debug("second run")

    assert "second run" in (tmp_path / "log2.log").read_text()
    assert "second run" not in (tmp_path / "log1.log").read_text()


def test_runner_logs_do_not_leak_between_runners(tmp_path: Path):
    from assertkit.config import CaseConfig, SuiteConfig
    from assertkit.runner import Runner

    def suite(case_name: str) -> SuiteConfig:
        return SuiteConfig(
            cases=[
                CaseConfig(
                    name=case_name,
                    checks=[{"contains": {"value": "abc", "substring": "b"}}],
                )
            ]
        )

    run_a = Runner(suite("case-a"), output_dir=tmp_path / "a").execute()
    run_b = Runner(suite("case-b"), output_dir=tmp_path / "b").execute()

    log_a = (run_a / "debug.log").read_text()
    log_b = (run_b / "debug.log").read_text()
    assert "case-a" in log_a and "case-b" not in log_a
    assert "case-b" in log_b and "case-a" not in log_b
