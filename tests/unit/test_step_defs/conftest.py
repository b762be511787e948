"""Unit test conftest for step definitions.

This conftest is loaded by pytest when running unit tests from this directory.
It overrides the browser fixture from the root conftest.py to provide a mock
session instead of a real browser, enabling isolated unit testing of
step definition functions and full scenario runs without a browser.
"""

from typing import Iterator

import pytest

from tests.unit.mocks import MockBrowserSession


# -- Mock Session Fixture --
# This fixture overrides the real browser_session fixture in the root conftest.py


@pytest.fixture
def browser_session() -> Iterator[MockBrowserSession]:
    """Mock browser session fixture."""
    session = MockBrowserSession()
    yield session
    session.close()


@pytest.fixture
def login_page(browser_session: MockBrowserSession) -> MockBrowserSession:
    """Mock session already showing the SauceDemo login page."""
    browser_session.navigate("https://www.saucedemo.com/")
    return browser_session
