'''
Page object for the ACME demo app login page.
'''
import logging
from types import MappingProxyType

import allure
from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

import settings
from .base_page import BasePage

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    USERNAME_FIELD = (By.ID, "username")
    PASSWORD_FIELD = (By.ID, "password")
    SIGN_IN_BUTTON = (By.ID, "log-in")
    REMEMBER_ME_CHECKBOX = (By.XPATH, "//input[@type='checkbox']")
    LOGIN_FORM = (By.XPATH, "//div[contains(text(), 'Login Form')]")
    APP_LOGO = (By.XPATH, "//a[@href='/index.html']")

    LOCATORS = MappingProxyType({
        "usernameField": USERNAME_FIELD,
        "passwordField": PASSWORD_FIELD,
        "signInButton": SIGN_IN_BUTTON,
        "rememberMeCheckbox": REMEMBER_ME_CHECKBOX,
        "loginForm": LOGIN_FORM,
        "appLogo": APP_LOGO,
    })

    def __init__(self, driver, base_url=settings.BASE_URL, **kwargs):
        super().__init__(driver, **kwargs)
        self.base_url = base_url

    @allure.step("Open login page")
    def navigate(self):
        self.open(self.base_url)

    def is_login_page_displayed(self):
        """Waits for the login form; False if it never becomes visible.

        Only the wait timeout is absorbed. A dead session or any other driver
        error still propagates.
        """
        try:
            self.wait_visible(self.LOGIN_FORM)
        except TimeoutException:
            logger.info("Login form not visible after %ss", self.timeout)
            return False
        return True

    def is_app_logo_displayed(self):
        try:
            self.wait_visible(self.APP_LOGO)
        except TimeoutException:
            return False
        return True

    @allure.step("Enter username '{username}'")
    def enter_username(self, username):
        logger.info("Entering username: %s", username)
        self.input_text(self.USERNAME_FIELD, username)

    @allure.step("Enter password")
    def enter_password(self, password):
        logger.info("Entering password")
        self.input_text(self.PASSWORD_FIELD, password)

    @allure.step("Click Sign In")
    def click_sign_in(self):
        logger.info("Clicking Sign In")
        self.click_element(self.SIGN_IN_BUTTON)

    def login(self, username, password):
        logger.info("Logging in as %s", username)
        self.enter_username(username)
        self.enter_password(password)
        self.click_sign_in()

    @allure.step("Check Remember Me")
    def check_remember_me(self):
        logger.info("Checking Remember Me")
        checkbox = self.wait_clickable(self.REMEMBER_ME_CHECKBOX)
        if not checkbox.is_selected():
            checkbox.click()

    @allure.step("Uncheck Remember Me")
    def uncheck_remember_me(self):
        logger.info("Unchecking Remember Me")
        checkbox = self.wait_clickable(self.REMEMBER_ME_CHECKBOX)
        if checkbox.is_selected():
            checkbox.click()

    def is_remember_me_checked(self):
        checked = self.wait_visible(self.REMEMBER_ME_CHECKBOX).is_selected()
        logger.info("Remember Me checked: %s", checked)
        return checked

    def get_username_value(self):
        logger.info("Reading username field")
        return self.wait_visible(self.USERNAME_FIELD).get_attribute("value")

    def get_password_value(self):
        logger.info("Reading password field")
        return self.wait_visible(self.PASSWORD_FIELD).get_attribute("value")

    def is_sign_in_button_enabled(self):
        enabled = self.wait_visible(self.SIGN_IN_BUTTON).is_enabled()
        logger.info("Sign In button enabled: %s", enabled)
        return enabled

    def wait_for_url_change(self, previous_url, timeout=settings.LOGIN_TRANSITION_WAIT):
        """Returns True once the browser leaves previous_url, False after timeout seconds."""
        try:
            WebDriverWait(self.driver, timeout, poll_frequency=self.poll_frequency).until(
                EC.url_changes(previous_url))
        except TimeoutException:
            return False
        return True
