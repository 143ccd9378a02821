"""Recorder service: one record per event, written to the requests table."""
from typing import Any, Callable
import structlog
import time

from ..models import Record, WriteResult
from ..stores import KeyValueStore, create_store
from ..metrics import Metrics, metrics as default_metrics

log = structlog.get_logger()

TABLE_NAME = "requests"


def epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class RequestRecorder:
    """
    Writes each inbound event as a {id, event} record.

    The store is held for the recorder's lifetime; build one recorder per
    process and reuse it across invocations.
    """

    def __init__(
        self,
        store: KeyValueStore | None = None,
        clock: Callable[[], int] | None = None,
        metrics: Metrics | None = None,
    ):
        """
        Initialize recorder.

        Args:
            store: Store backend (defaults to the configured backend)
            clock: Returns the current epoch milliseconds
            metrics: Metrics sink (defaults to the process-wide instance)
        """
        if store is None:
            store = create_store()
        self._store = store
        self._clock = clock or epoch_millis
        self._metrics = metrics or default_metrics

    @property
    def store(self) -> KeyValueStore:
        return self._store

    def new_id(self) -> str:
        return str(self._clock())

    def record(self, event: Any) -> WriteResult:
        """
        Persist one event. Store failures are returned, not raised.
        """
        record = Record(id=self.new_id(), event=event)
        with structlog.contextvars.bound_contextvars(request_id=record.id):
            return self._write(record)

    def _write(self, record: Record) -> WriteResult:
        start_time = time.perf_counter()

        try:
            ack = self._store.put(TABLE_NAME, record.model_dump())
        except Exception as e:
            self._metrics.record_write(self._store.name, False, time.perf_counter() - start_time)
            log.warning(
                "record.store_failed",
                id=record.id,
                table=TABLE_NAME,
                adapter=self._store.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            return WriteResult.failure(record.id, e)

        self._metrics.record_write(self._store.name, True, time.perf_counter() - start_time)
        log.info("record.stored", id=record.id, table=TABLE_NAME, adapter=self._store.name)
        return WriteResult.success(record.id, ack)

    def health_check(self) -> bool:
        """Check store health."""
        return self._store.health_check()
