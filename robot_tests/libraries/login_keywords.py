"""SauceDemo Login Keywords for Robot Framework.

Keywords for the SauceDemo login page, aligned with BDD scenario steps.
Uses @keyword decorator to map clean function names to scenario step text.
Robot strips the Given/When/Then prefixes before matching, so the suites
read the same as the feature file.

Mirrors: tests/step_defs/login_steps.py
"""

from typing import Optional

from robot.api import logger
from robot.api.deco import keyword

from saucedemo_ui import steps
from saucedemo_ui.config import RunSettings
from saucedemo_ui.exceptions import BrowserSetupError
from saucedemo_ui.session import BrowserSession


class SauceDemoLoginKeywords:
    """Keywords for SauceDemo login scenarios.

    The library is scoped per test so every test owns a fresh browser
    session and no state leaks between scenarios.
    """

    ROBOT_LIBRARY_SCOPE = "TEST"
    ROBOT_LIBRARY_DOC_FORMAT = "TEXT"

    def __init__(self, session: Optional[BrowserSession] = None) -> None:
        """Initialize SauceDemoLoginKeywords.

        Arguments:
            session: Already open browser session (mainly for unit tests)
        """
        self._session = session

    @property
    def session(self) -> BrowserSession:
        if self._session is None:
            raise BrowserSetupError(
                "No browser session is open, run 'Open SauceDemo browser' first"
            )
        return self._session

    # =========================================================================
    # Browser Lifecycle Keywords
    # =========================================================================

    @keyword("Open SauceDemo browser")
    def open_browser(
        self,
        browser: Optional[str] = None,
        headless: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Start a browser session for the current test.

        Settings not given here come from the SAUCEDEMO_* environment
        variables.

        Arguments:
            browser: chrome or firefox
            headless: Run without a visible window
            timeout: Seconds to wait for pages and elements
        """
        settings = RunSettings.from_env().override(
            browser=browser, headless=headless, timeout=timeout
        )
        logger.info(f"Opening browser with {settings}")
        self._session = BrowserSession.open(settings)

    @keyword("Close SauceDemo browser")
    def close_browser(self) -> None:
        """Close the browser session, if one is open."""
        if self._session is None:
            return
        self._session.close()
        self._session = None
        logger.info("Browser closed")

    # =========================================================================
    # Login Keywords
    # =========================================================================

    @keyword("I am on the SauceDemo login page")
    def open_login_page(self) -> None:
        """Navigate to the SauceDemo login page.

        Maps to scenario step:
        - "Given I am on the SauceDemo login page"
        """
        steps.open_login_page(self.session)

    @keyword('I enter username "${text}"')
    def enter_username(self, text: str) -> None:
        """Clear the username field and type ``text``.

        Maps to scenario step:
        - 'When I enter username "standard_user"'
        """
        steps.enter_username(self.session, text)

    @keyword('I enter password "${text}"')
    def enter_password(self, text: str) -> None:
        """Clear the password field and type ``text``.

        Maps to scenario step:
        - 'When I enter password "secret_sauce"'
        """
        steps.enter_password(self.session, text)

    @keyword("I click the login button")
    def click_login_button(self) -> None:
        steps.click_login_button(self.session)

    @keyword("I should be navigated to the inventory page")
    def verify_inventory_page(self) -> None:
        """Verify the login redirected to the inventory page.

        Maps to scenario step:
        - "Then I should be navigated to the inventory page"
        """
        steps.should_be_on_inventory_page(self.session)

    @keyword('I should see the error message "${text}"')
    def verify_error_message(self, text: str) -> None:
        """Verify the error banner shows exactly ``text``.

        Maps to scenario step:
        - 'Then I should see the error message "Epic sadface: ..."'
        """
        steps.should_see_error_message(self.session, text)
