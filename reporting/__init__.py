from .report import ReportDocument, Status, TestEntry
from .html_renderer import HtmlRenderer
from .listener import ReportListener

__all__ = ["HtmlRenderer", "ReportDocument", "ReportListener", "Status", "TestEntry"]
