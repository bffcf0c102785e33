import pytest
from selenium.common.exceptions import InvalidSessionIdException, NoSuchElementException
from selenium.webdriver.common.by import By

from pages.login_page import LoginPage

BASE_URL = "https://demo.applitools.com/"


class FakeElement:
    def __init__(self, displayed=True, enabled=True, selected=False, on_click=None):
        self.displayed = displayed
        self.enabled = enabled
        self.selected = selected
        self.value = ""
        self.clicks = 0
        self.on_click = on_click

    def is_displayed(self):
        return self.displayed

    def is_enabled(self):
        return self.enabled

    def is_selected(self):
        return self.selected

    def clear(self):
        self.value = ""

    def send_keys(self, text):
        self.value += text

    def click(self):
        self.clicks += 1
        if self.on_click:
            self.on_click(self)

    def get_attribute(self, name):
        return self.value if name == "value" else None


class FakeDriver:
    """Just enough of a WebDriver to back the login page without a browser."""

    def __init__(self):
        self.current_url = "about:blank"
        self.alive = True
        self.visited = []
        self.elements = {
            LoginPage.USERNAME_FIELD: FakeElement(),
            LoginPage.PASSWORD_FIELD: FakeElement(),
            LoginPage.SIGN_IN_BUTTON: FakeElement(on_click=self._submit),
            LoginPage.REMEMBER_ME_CHECKBOX: FakeElement(on_click=self._toggle),
            LoginPage.LOGIN_FORM: FakeElement(),
            LoginPage.APP_LOGO: FakeElement(),
        }

    def _check_session(self):
        if not self.alive:
            raise InvalidSessionIdException("invalid session id")

    def _submit(self, element):
        self.current_url = BASE_URL + "app.html"

    @staticmethod
    def _toggle(element):
        element.selected = not element.selected

    def get(self, url):
        self._check_session()
        self.visited.append(url)
        self.current_url = url

    def find_element(self, by=By.ID, value=None):
        self._check_session()
        try:
            return self.elements[(by, value)]
        except KeyError:
            raise NoSuchElementException(f"Unable to locate element: {value}") from None

    def quit(self):
        self.alive = False


@pytest.fixture
def fake_driver():
    return FakeDriver()


@pytest.fixture
def page(fake_driver):
    return LoginPage(fake_driver, base_url=BASE_URL, timeout=0.3, poll_frequency=0.05)
