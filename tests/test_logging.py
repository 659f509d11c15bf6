"""Tests for fielddict.logging."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from fielddict.logging import (
    ROOT_LOGGER,
    configure_logging,
    get_logger,
    object_context,
    set_verbosity,
)
from fielddict.orchestrator import Orchestrator, RunOptions
from tests._fixtures.metadata_builder import MetadataBuilder


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def _flush() -> None:
    for handler in logging.getLogger(ROOT_LOGGER).handlers:
        handler.flush()


def test_file_records_carry_bound_object(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"
    configure_logging(log_file=log_file)
    logger = get_logger("orchestrator")

    logger.info("before")
    with object_context("Case"):
        logger.info("inside")
    logger.info("after")
    _flush()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith("[-] fielddict.orchestrator: before")
    assert lines[1].endswith("[Case] fielddict.orchestrator: inside")
    assert lines[2].endswith("[-] fielddict.orchestrator: after")


def test_nested_contexts_restore_outer_object(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    configure_logging(log_file=log_file)
    logger = get_logger()

    with object_context("Case"):
        with object_context("Account"):
            logger.info("inner")
        logger.info("outer")
    _flush()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert "[Account] fielddict: inner" in lines[0]
    assert "[Case] fielddict: outer" in lines[1]


def test_set_verbosity_toggles_debug_output(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    configure_logging(log_file=log_file)
    logger = get_logger("loaders")

    logger.debug("hidden")
    set_verbosity(True)
    logger.debug("shown")
    _flush()

    text = log_file.read_text(encoding="utf-8")
    assert "hidden" not in text
    assert "shown" in text


def test_reconfiguring_replaces_handlers(tmp_path: Path) -> None:
    configure_logging(log_file=tmp_path / "first.log")
    configure_logging()

    handlers = logging.getLogger(ROOT_LOGGER).handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.FileHandler)


def test_orchestrator_binds_object_for_its_records(
    metadata: MetadataBuilder, tmp_path: Path
) -> None:
    log_file = tmp_path / "analysis.log"
    configure_logging(log_file=log_file)
    metadata.field("Priority__c")

    Orchestrator().analyze(
        RunOptions(
            object_name="Case",
            out_dir=metadata.out_dir,
            repo_root=metadata.root,
            include_standard=False,
        )
    )
    _flush()

    text = log_file.read_text(encoding="utf-8")
    assert "[Case] fielddict.orchestrator: Pre-loading metadata files into memory..." in text
