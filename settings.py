'''
Run configuration for the ACME demo login suite.

Every value can be overridden through an environment variable of the same name.
'''
import os

BASE_URL = os.environ.get("BASE_URL", "https://demo.applitools.com/")
VALID_USERNAME = os.environ.get("VALID_USERNAME", "user@example.com")
VALID_PASSWORD = os.environ.get("VALID_PASSWORD", "password123")

BROWSER = os.environ.get("BROWSER", "chrome")

# Implicit and explicit waits can stack: a missing element may take
# IMPLICIT_WAIT + EXPLICIT_WAIT + one poll before a page call gives up.
IMPLICIT_WAIT = float(os.environ.get("IMPLICIT_WAIT", "10"))
EXPLICIT_WAIT = float(os.environ.get("EXPLICIT_WAIT", "10"))
POLL_FREQUENCY = float(os.environ.get("POLL_FREQUENCY", "0.5"))
LOGIN_TRANSITION_WAIT = float(os.environ.get("LOGIN_TRANSITION_WAIT", "3"))

REPORT_PATH = os.environ.get("REPORT_PATH", "test-output/extent-report.html")
REPORT_TITLE = os.environ.get("REPORT_TITLE", "Keyword-Driven Framework Test Report")
REPORT_NAME = os.environ.get("REPORT_NAME", "Test Execution Report")
