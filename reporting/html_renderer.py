"""HTML renderer for the execution report.

Produces a single self-contained page: header, system facts, a status
summary and one collapsible card per test with its log lines.
"""

import logging
import os
import tempfile
from html import escape
from pathlib import Path

from .report import Status

logger = logging.getLogger(__name__)

_STATUS_COLOURS = {
    Status.PASS: "#2e7d32",
    Status.FAIL: "#c62828",
    Status.SKIP: "#f9a825",
    Status.INFO: "#1565c0",
}


class HtmlRenderer:
    def __init__(self, path):
        self.path = Path(path)

    def render(self, document):
        html = self.to_html(document)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Write beside the target and swap it in, so readers never see a half-written file.
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".report-", suffix=".html")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(html)
            os.replace(tmp_name, self.path)
        except BaseException:
            os.unlink(tmp_name)
            raise
        logger.info("HTML report rendered (%d bytes)", len(html))
        return self.path

    def to_html(self, document):
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{escape(document.title)}</title>
    {self._styles()}
</head>
<body>
    <header>
        <h1>{escape(document.report_name)}</h1>
        <p class="meta">Started {document.created_at:%Y-%m-%d %H:%M:%S}</p>
    </header>
    {self._summary(document)}
    {self._system_info(document)}
    <section class="tests">
        {"".join(self._entry(entry) for entry in document.entries)}
    </section>
</body>
</html>
"""

    def _styles(self):
        return """<style>
        body { font-family: -apple-system, "Segoe UI", Roboto, sans-serif; margin: 0; background: #f4f5f7; color: #222; }
        header { background: #263238; color: #fff; padding: 16px 24px; }
        header h1 { margin: 0; font-size: 22px; }
        .meta { margin: 4px 0 0; opacity: .7; font-size: 13px; }
        .summary, .system, .tests { margin: 16px 24px; }
        .badge { display: inline-block; padding: 6px 12px; margin-right: 8px; border-radius: 4px; color: #fff; font-weight: 600; }
        table { border-collapse: collapse; background: #fff; }
        td, th { padding: 6px 12px; border: 1px solid #ddd; text-align: left; }
        details { background: #fff; margin-bottom: 8px; border-left: 6px solid #999; padding: 8px 12px; }
        summary { cursor: pointer; font-weight: 600; }
        pre { white-space: pre-wrap; background: #fafafa; padding: 8px; font-size: 12px; }
    </style>"""

    def _summary(self, document):
        badges = "".join(
            f'<span class="badge" style="background:{_STATUS_COLOURS[status]}">'
            f"{status.name} {count}</span>"
            for status, count in document.summary().items()
        )
        return f'<section class="summary">{badges}</section>'

    def _system_info(self, document):
        rows = "".join(
            f"<tr><th>{escape(key)}</th><td>{escape(value)}</td></tr>"
            for key, value in document.system_info.items()
        )
        return f'<section class="system"><h2>Environment</h2><table>{rows}</table></section>'

    def _entry(self, entry):
        status = entry.status.name if entry.status else "UNFINISHED"
        colour = _STATUS_COLOURS.get(entry.status, "#999")
        lines = "".join(
            f'<tr><td style="color:{_STATUS_COLOURS[level]}">{level.name}</td>'
            f"<td>{escape(message)}</td></tr>"
            for level, message in entry.logs
        )
        cause = f"<pre>{escape(entry.cause)}</pre>" if entry.cause else ""
        return f"""<details style="border-left-color:{colour}"{" open" if entry.status is Status.FAIL else ""}>
            <summary>{escape(entry.name)} <span style="color:{colour}">{status}</span></summary>
            <table>{lines}</table>
            {cause}
        </details>"""
