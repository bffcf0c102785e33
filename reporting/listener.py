"""pytest plugin that forwards test lifecycle events into the HTML report.

Each worker thread has its own "current test" slot, so tests running side by
side never log into each other's entries.
"""

import logging
import platform
import threading

import settings
from .html_renderer import HtmlRenderer
from .report import ReportDocument, Status

logger = logging.getLogger(__name__)


class ReportListener:
    def __init__(self, path=settings.REPORT_PATH, browser="Chrome",
                 title=settings.REPORT_TITLE, report_name=settings.REPORT_NAME):
        self.path = path
        self.browser = browser
        self.title = title
        self.report_name = report_name
        self.document = None
        self._slots = {}
        self._slots_lock = threading.Lock()

    # -- lifecycle events ------------------------------------------------

    def on_start(self):
        self.document = ReportDocument(HtmlRenderer(self.path), self.title, self.report_name)
        self.document.set_system_info("Browser", self.browser)
        self.document.set_system_info("OS", platform.system())
        logger.info("Report started: %s", self.path)

    def on_test_start(self, name):
        entry = self.document.create_test(name)
        with self._slots_lock:
            self._slots[threading.get_ident()] = entry
        return entry

    def on_test_success(self, name):
        logger.info("%s - PASSED", name)
        self._current(name).finalize(Status.PASS, f"{name} - PASSED")

    def on_test_failure(self, name, cause):
        logger.error("%s - FAILED: %s", name, cause)
        self._current(name).finalize(Status.FAIL, f"{name} - FAILED", cause=cause)

    def on_test_skipped(self, name, reason=None):
        message = f"{name} - SKIPPED"
        if reason:
            message += f": {reason}"
        logger.info(message)
        self._current(name).finalize(Status.SKIP, message)

    def on_test_finish(self):
        with self._slots_lock:
            self._slots.pop(threading.get_ident(), None)

    def on_finish(self):
        if self.document is not None:
            return self.document.flush()
        return None

    def current_entry(self):
        with self._slots_lock:
            return self._slots.get(threading.get_ident())

    def _current(self, name):
        entry = self.current_entry()
        if entry is None:
            logger.warning("No report entry bound for %s; creating one", name)
            entry = self.on_test_start(name)
        return entry

    # -- pytest hooks ----------------------------------------------------

    def pytest_sessionstart(self, session):
        self.on_start()

    def pytest_runtest_logstart(self, nodeid, location):
        self.on_test_start(location[2])

    def pytest_runtest_logreport(self, report):
        name = report.head_line or report.nodeid
        entry = self._current(name)

        if report.when == "teardown":
            if report.failed:
                if entry.finished:
                    logger.error("Teardown of %s failed after it finished as %s", name, entry.status.name)
                    entry.log(Status.INFO, f"Teardown error: {report.longreprtext}")
                else:
                    self.on_test_failure(name, report.longreprtext)
            elif not entry.finished:
                # e.g. --setup-only: no call phase ran
                self.on_test_skipped(name, "not executed")
            self.on_test_finish()
            return

        if entry.finished:
            return
        if report.skipped:
            self.on_test_skipped(name, _skip_reason(report))
        elif report.failed:
            self.on_test_failure(name, report.longreprtext)
        elif report.when == "call":
            self.on_test_success(name)

    def pytest_sessionfinish(self, session, exitstatus):
        self.on_finish()


def _skip_reason(report):
    if hasattr(report, "wasxfail"):
        return f"expected failure: {report.wasxfail}" if report.wasxfail else "expected failure"
    longrepr = report.longrepr
    if isinstance(longrepr, tuple) and len(longrepr) == 3:
        reason = longrepr[2]
        return reason[len("Skipped: "):] if reason.startswith("Skipped: ") else reason
    return str(longrepr) if longrepr else None
