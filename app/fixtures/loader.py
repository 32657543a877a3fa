"""
app/fixtures/loader.py

One-shot loader that seeds storage from fixture files.

Pipeline, run once per loader:

  discover files -> resolve container from file name -> parse XML
  -> flatten container -> save each record through the sink for its kind
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from app.domain.fixture_loading import (
    FailurePolicy,
    FixtureLoadSummary,
    FixturePolicies,
    LoaderState,
    SkippedFixture,
)
from app.fixtures.containers import FixtureContainer, parse_container
from app.fixtures.discovery import discover_fixture_files
from app.fixtures.errors import (
    FixtureLoaderStateError,
    FixturePersistenceError,
    MalformedFixtureError,
    UnknownContainerError,
    UnregisteredRecordKindError,
)
from app.fixtures.registry import ContainerRegistry
from app.fixtures.sinks import RecordKind, SinkRegistry
from app.logging_utils import log_event

logger = logging.getLogger(__name__)


class FixtureLoader:
    """
    Loads every discovered fixture file into the sinks registered for its records.
    """

    def __init__(
        self,
        *,
        fixture_dir: Path,
        sinks: SinkRegistry,
        containers: ContainerRegistry | None = None,
        file_suffix: str = "Container",
        load_order: tuple[str, ...] = (),
        policies: FixturePolicies | None = None,
    ) -> None:
        self._fixture_dir = fixture_dir
        self._sinks = sinks
        self._containers = containers or ContainerRegistry()
        self._file_suffix = file_suffix
        self._load_order = load_order
        self._policies = policies or FixturePolicies()
        self._state = LoaderState.NOT_STARTED

    @property
    def state(self) -> LoaderState:
        return self._state

    def run(self) -> FixtureLoadSummary:
        if self._state is not LoaderState.NOT_STARTED:
            raise FixtureLoaderStateError(f"Fixture loader already {self._state.value}.")

        self._state = LoaderState.RUNNING
        logger.info("Preparing to load fixture data into database")
        try:
            return self._load_all()
        finally:
            self._state = LoaderState.DONE

    def _load_all(self) -> FixtureLoadSummary:
        files = discover_fixture_files(
            self._fixture_dir,
            suffix=self._file_suffix,
            load_order=self._load_order,
        )

        skipped: list[SkippedFixture] = []
        files_loaded = 0
        saved = 0
        records_skipped = 0
        records_failed = 0

        for path in files:
            container = self._ingest_file(path, skipped)
            if container is None:
                continue
            files_loaded += 1

            for record in container.all_records():
                outcome = self._dispatch(record)
                if outcome == "saved":
                    saved += 1
                elif outcome == "skipped":
                    records_skipped += 1
                else:
                    records_failed += 1

        summary = FixtureLoadSummary(
            files_discovered=len(files),
            files_loaded=files_loaded,
            records_saved=saved,
            records_skipped=records_skipped,
            records_failed=records_failed,
            skipped_files=skipped,
        )
        log_event(
            logger,
            logging.INFO,
            "fixture_load_completed",
            files_discovered=summary.files_discovered,
            files_loaded=summary.files_loaded,
            files_skipped=len(summary.skipped_files),
            records_saved=summary.records_saved,
            records_skipped=summary.records_skipped,
            records_failed=summary.records_failed,
        )
        return summary

    def _ingest_file(self, path: Path, skipped: list[SkippedFixture]) -> FixtureContainer | None:
        try:
            container_cls = self._containers.resolve_file(path.name)
        except UnknownContainerError as exc:
            self._handle_file_failure(
                path,
                exc,
                policy=self._policies.unknown_container,
                reason="unknown_container",
                skipped=skipped,
            )
            return None

        try:
            return parse_container(path, container_cls)
        except MalformedFixtureError as exc:
            self._handle_file_failure(
                path,
                exc,
                policy=self._policies.malformed_content,
                reason="malformed_content",
                skipped=skipped,
            )
            return None

    @staticmethod
    def _handle_file_failure(
        path: Path,
        exc: Exception,
        *,
        policy: FailurePolicy,
        reason: str,
        skipped: list[SkippedFixture],
    ) -> None:
        if policy is FailurePolicy.RAISE:
            raise exc
        log_event(
            logger,
            logging.ERROR,
            "fixture_file_skipped",
            exc_info=exc,
            file=path.name,
            reason=reason,
        )
        skipped.append(SkippedFixture(file_name=path.name, reason=reason, message=str(exc)))

    def _dispatch(self, record: Any) -> str:
        try:
            sink = self._sinks.sink_for(RecordKind.of(record))
        except UnregisteredRecordKindError as exc:
            if self._policies.unregistered_kind is FailurePolicy.RAISE:
                raise
            logger.error("No storage sink for record %r: %s", record, exc)
            return "skipped"

        try:
            sink.save(record)
        except FixturePersistenceError:
            if self._policies.persistence_error is FailurePolicy.RAISE:
                raise
            logger.exception("Failed to save fixture record %r", record)
            return "failed"

        logger.info("Saved: %r", record)
        return "saved"
