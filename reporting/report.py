"""In-memory execution report: one entry per test, rendered to disk once."""

import enum
import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


class Status(enum.Enum):
    INFO = "info"
    PASS = "pass"
    FAIL = "fail"
    SKIP = "skip"

    @property
    def is_terminal(self):
        return self is not Status.INFO


@dataclass
class TestEntry:
    """A single test in the report. Reaches exactly one terminal status."""

    __test__ = False  # not a pytest test class

    name: str
    status: Optional[Status] = None
    cause: Optional[str] = None
    logs: List[Tuple[Status, str]] = field(default_factory=list)
    started_at: datetime = field(default_factory=datetime.now)
    ended_at: Optional[datetime] = None

    @property
    def finished(self):
        return self.status is not None

    def log(self, status, message):
        if status.is_terminal:
            self.finalize(status, message)
        else:
            self.logs.append((status, message))

    def finalize(self, status, message, cause=None):
        if not status.is_terminal:
            raise ValueError(f"{status.name} is not a terminal status")
        if self.finished:
            raise RuntimeError(f"Test {self.name!r} already finished with {self.status.name}")
        self.status = status
        self.cause = cause
        self.logs.append((status, message))
        self.ended_at = datetime.now()


class ReportDocument:
    """Process-wide report shared by all workers.

    Entry creation is guarded by a lock; the document is written by its
    renderer exactly once, on flush().
    """

    def __init__(self, renderer, title, report_name):
        self.renderer = renderer
        self.title = title
        self.report_name = report_name
        self.system_info = {}
        self.created_at = datetime.now()
        self._entries = []
        self._lock = threading.Lock()
        self._flushed = False

    @property
    def entries(self):
        with self._lock:
            return list(self._entries)

    @property
    def flushed(self):
        return self._flushed

    def set_system_info(self, key, value):
        with self._lock:
            self.system_info[key] = value

    def create_test(self, name):
        entry = TestEntry(name)
        with self._lock:
            self._entries.append(entry)
        return entry

    def summary(self):
        counts = {status: 0 for status in Status if status.is_terminal}
        for entry in self.entries:
            if entry.status is not None:
                counts[entry.status] += 1
        return counts

    def flush(self):
        """Renders the document. Only the first call writes anything."""
        with self._lock:
            if self._flushed:
                logger.warning("Report already flushed; ignoring")
                return None
            self._flushed = True
        unfinished = [e.name for e in self.entries if not e.finished]
        if unfinished:
            logger.warning("Tests without a final status: %s", ", ".join(unfinished))
        path = self.renderer.render(self)
        logger.info("Report written to %s", path)
        return path
