import enum
import logging
from contextlib import contextmanager

import chromedriver_autoinstaller
from selenium import webdriver
from selenium.common.exceptions import WebDriverException

import settings

logger = logging.getLogger(__name__)


class UnknownBrowser(ValueError):
    """Raised when a browser name is not one of chrome, firefox or edge."""


class DriverStartupFailure(RuntimeError):
    """Raised when the browser or its driver binary could not be launched."""


class Browser(enum.Enum):
    CHROME = "chrome"
    FIREFOX = "firefox"
    EDGE = "edge"

    @classmethod
    def from_name(cls, name):
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnknownBrowser(
                f"Unknown browser {name!r}; expected one of: "
                + ", ".join(b.value for b in cls)
            ) from None

    @property
    def label(self):
        return self.value.capitalize()


def _launch(browser):
    if browser is Browser.CHROME:
        chromedriver_autoinstaller.install()  # Automatically installs chromedriver if not present
        return webdriver.Chrome()
    if browser is Browser.FIREFOX:
        return webdriver.Firefox()
    return webdriver.Edge()


def init_driver(browser_name=settings.BROWSER, implicit_wait=settings.IMPLICIT_WAIT):
    """Starts a browser by name and returns a maximized WebDriver with an implicit wait set."""
    browser = Browser.from_name(browser_name)
    logger.info("Starting %s WebDriver", browser.label)
    try:
        driver = _launch(browser)
    except (WebDriverException, OSError) as exc:
        logger.error("Could not start %s WebDriver: %s", browser.label, exc)
        raise DriverStartupFailure(f"{browser.label} WebDriver failed to start") from exc

    driver.implicitly_wait(implicit_wait)
    driver.maximize_window()
    logger.info("%s WebDriver initialized and window maximized", browser.label)
    return driver


def quit_driver(driver):
    """Ends the session and releases the browser process. Does nothing for None."""
    if driver is not None:
        driver.quit()
        logger.info("WebDriver session closed")


def close_driver(driver):
    """Closes the active window only."""
    if driver is not None:
        driver.close()
        logger.info("Active browser window closed")


@contextmanager
def managed_driver(browser_name=settings.BROWSER, implicit_wait=settings.IMPLICIT_WAIT):
    driver = init_driver(browser_name, implicit_wait=implicit_wait)
    try:
        yield driver
    finally:
        try:
            quit_driver(driver)
        except Exception:
            logger.exception("Error while quitting WebDriver")
