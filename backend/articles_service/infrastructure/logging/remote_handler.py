"""Logging handler that ships records to a central log collector over HTTP."""

import logging
import queue
from logging.handlers import QueueHandler, QueueListener

import httpx


class RemoteLogHandler(logging.Handler):
    """POSTs each formatted record as JSON to ``url``.

    Delivery is a blocking HTTP call, so this handler is meant to sit behind
    a QueueListener (see ``start_remote_logging``), never on a logger that
    the event loop writes to directly.

    Records emitted by httpx/httpcore themselves are dropped, otherwise every
    delivery would log a request that is in turn delivered.
    """

    _IGNORED_PREFIXES = ("httpx", "httpcore")

    def __init__(
        self,
        url: str,
        service: str,
        level: int = logging.INFO,
        timeout: float = 2.0,
        http_client: httpx.Client | None = None,
    ):
        super().__init__(level)
        self._url = url
        self._service = service
        self._http_client = http_client or httpx.Client(timeout=timeout)

    def emit(self, record: logging.LogRecord) -> None:
        if record.name.startswith(self._IGNORED_PREFIXES):
            return
        try:
            payload = {
                "service": self._service,
                "level": record.levelname,
                "logger": record.name,
                "message": self.format(record),
            }
            response = self._http_client.post(self._url, json=payload)
            response.raise_for_status()
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        try:
            self._http_client.close()
        finally:
            super().close()


def start_remote_logging(handler: logging.Handler) -> tuple[QueueHandler, QueueListener]:
    """Put ``handler`` behind a queue drained by a background thread.

    The returned QueueHandler only enqueues, so it is safe to attach to
    loggers used from the event loop. Stop the listener to flush the queue.
    """
    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    listener = QueueListener(records, handler, respect_handler_level=True)
    listener.start()
    return QueueHandler(records), listener
