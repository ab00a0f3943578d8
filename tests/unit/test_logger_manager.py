from __future__ import annotations

import json
import logging

from cram_launcher.utilities.logger_manager import (
    ROOT_LOGGER_NAME,
    LoggerConfig,
    LoggerManager,
)


def test_structured_console_records_carry_context(tmp_path, capsys) -> None:
    manager = LoggerManager(
        LoggerConfig(log_dir=tmp_path / "logs", structured_logging=True)
    )
    try:
        child = logging.getLogger(f"{ROOT_LOGGER_NAME}.venv.provision")
        with manager.context(root="/work", selector="run"):
            child.info("Provisioning: %s", "install prysk")
        child.info("outside")
        manager.flush()
    finally:
        manager.shutdown()

    lines = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
    assert lines[0]["message"] == "Provisioning: install prysk"
    assert lines[0]["context"] == {"root": "/work", "selector": "run"}
    assert lines[0]["level"] == "INFO"
    assert lines[1]["context"] == {}


def test_log_level_filters_debug(tmp_path, capsys) -> None:
    manager = LoggerManager(LoggerConfig(log_dir=tmp_path, log_level="warning"))
    try:
        logger = manager.get_logger()
        logger.info("hidden")
        logger.warning("shown")
    finally:
        manager.shutdown()
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_file_logging_writes_log_file(tmp_path) -> None:
    log_dir = tmp_path / "file-logs"
    manager = LoggerManager(
        LoggerConfig(log_dir=log_dir, log_file_name="run.log", file_logging=True)
    )
    try:
        manager.get_logger().error("provisioning failed")
        manager.flush()
    finally:
        manager.shutdown()
    assert "provisioning failed" in (log_dir / "run.log").read_text(encoding="utf-8")


def test_shutdown_detaches_handlers(tmp_path) -> None:
    manager = LoggerManager(LoggerConfig(log_dir=tmp_path))
    logger = manager.get_logger()
    assert logger.handlers
    assert logger.propagate is False
    manager.shutdown()
    assert not logger.handlers
    assert logger.propagate is True


def test_reconfiguring_replaces_handlers(tmp_path) -> None:
    first = LoggerManager(LoggerConfig(log_dir=tmp_path))
    second = LoggerManager(LoggerConfig(log_dir=tmp_path))
    try:
        assert len(second.get_logger().handlers) == 1
        assert first.get_logger() is second.get_logger()
    finally:
        second.shutdown()
