import logging

import pytest

import settings
from driver_util import Browser, UnknownBrowser, init_driver, quit_driver
from pages.login_page import LoginPage
from reporting import ReportListener

pytest_plugins = ["pytester"]

logger = logging.getLogger(__name__)


def pytest_addoption(parser):
    group = parser.getgroup("login-suite")
    group.addoption("--browser", default=settings.BROWSER,
                    help="browser to drive: chrome, firefox or edge")
    group.addoption("--extent-report", default=settings.REPORT_PATH,
                    help="where to write the HTML execution report")
    group.addoption("--run-e2e", action="store_true", default=False,
                    help="run the scenarios that drive a real browser")


def pytest_configure(config):
    try:
        browser = Browser.from_name(config.getoption("--browser"))
    except UnknownBrowser as exc:
        raise pytest.UsageError(str(exc)) from exc
    listener = ReportListener(config.getoption("--extent-report"), browser=browser.label)
    config.pluginmanager.register(listener, "extent-report-listener")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="needs a browser; pass --run-e2e to run")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture
def browser_name(request):
    return request.config.getoption("--browser")


@pytest.fixture
def driver(browser_name):
    logger.info("=== Starting Test Setup ===")
    driver = init_driver(browser_name)
    yield driver
    logger.info("=== Tearing Down Test ===")
    try:
        quit_driver(driver)
    except Exception:
        logger.exception("Error during teardown")


@pytest.fixture
def login_page(driver):
    return LoginPage(driver)
