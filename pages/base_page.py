import logging

from selenium.common.exceptions import InvalidSessionIdException, WebDriverException
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

import settings

logger = logging.getLogger(__name__)


class NavigationFailure(RuntimeError):
    """Raised when a page could not be loaded (DNS, network, TLS...)."""


class BasePage:
    """Explicit-wait helpers shared by all page objects.

    The driver is borrowed: pages never start or quit it.
    """

    def __init__(self, driver, timeout=settings.EXPLICIT_WAIT, poll_frequency=settings.POLL_FREQUENCY):
        self.driver = driver
        self.timeout = timeout
        self.poll_frequency = poll_frequency
        self.wait = WebDriverWait(driver, timeout, poll_frequency=poll_frequency)

    @property
    def current_url(self):
        return self.driver.current_url

    def open(self, url):
        logger.info("Navigating to: %s", url)
        try:
            self.driver.get(url)
        except InvalidSessionIdException:
            raise
        except WebDriverException as exc:
            raise NavigationFailure(f"Could not load {url}: {exc.msg}") from exc

    def wait_visible(self, locator):
        return self.wait.until(EC.visibility_of_element_located(locator))

    def wait_clickable(self, locator):
        return self.wait.until(EC.element_to_be_clickable(locator))

    def input_text(self, locator, text):
        element = self.wait_visible(locator)
        element.clear()
        element.send_keys(text)

    def click_element(self, locator):
        self.wait_clickable(locator).click()
