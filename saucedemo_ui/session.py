"""
Browser session used by the SauceDemo step definitions.

Wraps a Selenium WebDriver behind the small driver API the steps need.
Every call blocks until its wait condition resolves or ``timeout`` seconds
elapse; Selenium timeouts are translated into ``NavigationError`` and
``ElementNotFoundError``.
"""

import logging
import sys
from typing import Any, Callable, Tuple, Union

from selenium import webdriver
from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from saucedemo_ui.config import RunSettings
from saucedemo_ui.exceptions import (
    BrowserSetupError,
    ElementNotFoundError,
    NavigationError,
)

logger = logging.getLogger(__name__)

Locator = Union[str, Tuple[str, str]]


def create_webdriver(settings: RunSettings) -> WebDriver:
    """Start a local browser for the given run settings.

    Args:
        settings: Browser name and headless flag

    Returns:
        A running WebDriver instance
    """
    logger.info(
        "Starting %s (headless=%s)", settings.browser, settings.headless
    )
    try:
        if settings.browser == "firefox":
            options = webdriver.FirefoxOptions()
            if settings.headless:
                options.add_argument("-headless")
            return webdriver.Firefox(options=options)

        options = webdriver.ChromeOptions()
        if settings.headless:
            options.add_argument("--headless=new")
        options.add_argument("--no-sandbox")
        options.add_argument("--disable-dev-shm-usage")
        return webdriver.Chrome(options=options)
    except WebDriverException as e:
        raise BrowserSetupError(
            f"Failed to start {settings.browser}: {e.msg}"
        ) from e


def _select_all_modifier() -> str:
    # Select-all is Command+A on macOS, Control+A elsewhere
    return Keys.COMMAND if sys.platform == "darwin" else Keys.CONTROL


def _as_locator(selector: Locator) -> Tuple[str, str]:
    if isinstance(selector, tuple):
        return selector
    return (By.CSS_SELECTOR, selector)


class BrowserSession:
    """One browser session, owned by a single scenario.

    Example usage in step definitions:
        @when(parsers.parse('I enter username "{text}"'))
        def step(browser_session, text):
            browser_session.set_field_value("#user-name", text)
    """

    def __init__(self, driver: WebDriver, timeout: float = 10.0) -> None:
        """Initialize the session.

        Args:
            driver: Selenium WebDriver to drive
            timeout: Upper bound in seconds for every wait
        """
        self.driver = driver
        self.timeout = timeout

    @classmethod
    def open(cls, settings: RunSettings) -> "BrowserSession":
        """Start a browser and wrap it in a session."""
        return cls(create_webdriver(settings), timeout=settings.timeout)

    def __enter__(self) -> "BrowserSession":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Quit the underlying browser."""
        try:
            self.driver.quit()
        except WebDriverException as e:
            logger.warning("Error while closing browser: %s", e)

    def _wait_for(
        self, condition: Callable[[WebDriver], Any], selector: Locator
    ) -> WebElement:
        locator = _as_locator(selector)
        try:
            return WebDriverWait(self.driver, self.timeout).until(condition(locator))
        except TimeoutException as e:
            raise ElementNotFoundError(locator[1], self.timeout) from e

    def navigate(self, url: str) -> None:
        """Load ``url`` and wait for the document to finish loading.

        Raises:
            NavigationError: The page did not load, or the browser ended up
                somewhere other than ``url``
        """
        logger.info("Navigating to %s", url)
        try:
            self.driver.get(url)
            WebDriverWait(self.driver, self.timeout).until(
                lambda d: d.execute_script("return document.readyState")
                == "complete"
            )
        except TimeoutException as e:
            raise NavigationError(
                f"Page '{url}' did not finish loading within {self.timeout}s"
            ) from e
        except WebDriverException as e:
            raise NavigationError(f"Cannot reach '{url}': {e.msg}") from e

        current_url = self.driver.current_url
        if not current_url.startswith(url):
            raise NavigationError(
                f"Expected to land on '{url}', but current URL is '{current_url}'"
            )

    def set_field_value(self, selector: Locator, value: str) -> None:
        """Clear an input field and type ``value`` into it.

        Raises:
            ElementNotFoundError: The field is not on the page
            AssertionError: The field does not hold ``value`` afterwards
        """
        element = self._wait_for(EC.presence_of_element_located, selector)
        element.clear()
        # Controlled inputs can keep their state after clear()
        if element.get_attribute("value"):
            element.send_keys(_select_all_modifier(), "a")
            element.send_keys(Keys.DELETE)
        element.send_keys(value)

        actual = element.get_attribute("value") or ""
        if actual != value:
            raise AssertionError(
                f"Field '{_as_locator(selector)[1]}' should contain "
                f"'{value}' but contains '{actual}'"
            )
        logger.debug("Set %s", _as_locator(selector)[1])

    def click(self, selector: Locator) -> None:
        """Click an element once it is clickable."""
        element = self._wait_for(EC.element_to_be_clickable, selector)
        element.click()
        logger.debug("Clicked %s", _as_locator(selector)[1])

    def get_current_url(self) -> str:
        return self.driver.current_url

    def get_element_text(self, selector: Locator) -> str:
        """Return the raw ``textContent`` of an element once it is visible.

        Unlike ``WebElement.text`` the whitespace is not collapsed, so exact
        comparisons stay case and whitespace sensitive.
        """
        element = self._wait_for(EC.visibility_of_element_located, selector)
        return element.get_attribute("textContent") or ""

    def wait_for_url_contains(self, fragment: str) -> bool:
        """Wait until the current URL contains ``fragment``.

        Returns:
            True if it did, False if the wait timed out
        """
        try:
            WebDriverWait(self.driver, self.timeout).until(EC.url_contains(fragment))
            return True
        except TimeoutException:
            return False
