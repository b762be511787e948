"""Root conftest.py - Browser fixtures and step definition loading for pytest-bdd."""

from typing import Iterator

import pytest

from saucedemo_ui.config import SUPPORTED_BROWSERS, RunSettings
from saucedemo_ui.exceptions import BrowserSetupError
from saucedemo_ui.session import BrowserSession
from saucedemo_ui.steps import PHASE_BY_STEP_TYPE, registry

# Load the step definition module as a plugin so pytest-bdd can match
# its steps from any test module in the tree
pytest_plugins = ["tests.step_defs.login_steps"]


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("saucedemo", "SauceDemo browser settings")
    group.addoption(
        "--browser",
        choices=SUPPORTED_BROWSERS,
        default=None,
        help="Browser to run scenarios in (default: $SAUCEDEMO_BROWSER or chrome)",
    )
    group.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="Show the browser window instead of running headless",
    )
    group.addoption(
        "--wait-timeout",
        type=float,
        default=None,
        help="Seconds to wait for pages and elements (default: 10)",
    )


@pytest.fixture(scope="session")
def run_settings(pytestconfig: pytest.Config) -> RunSettings:
    """Run settings from the environment, overridden by command-line options."""
    settings = RunSettings.from_env().override(
        browser=pytestconfig.getoption("--browser"),
        headless=False if pytestconfig.getoption("--headed") else None,
        timeout=pytestconfig.getoption("--wait-timeout"),
    )
    print(f"Browser settings: {settings}")
    return settings


@pytest.fixture
def browser_session(run_settings: RunSettings) -> Iterator[BrowserSession]:
    """Fresh browser session for each scenario.

    Skips the scenario if no browser can be started on this machine.
    """
    try:
        session = BrowserSession.open(run_settings)
    except BrowserSetupError as e:
        pytest.skip(f"Failed to start browser: {e}")

    yield session

    # Always runs, even if the scenario fails
    session.close()


def pytest_bdd_before_scenario(request, feature, scenario) -> None:
    print(f"\nScenario: {scenario.name}")


def pytest_bdd_step_error(
    request, feature, scenario, step, step_func, step_func_args, exception
) -> None:
    print(f"✗ Step failed: {step.keyword} {step.name}\n  {exception}")


def pytest_bdd_before_step(request, feature, scenario, step, step_func) -> None:
    # Every scenario line must resolve to exactly one registered step
    registry.match(PHASE_BY_STEP_TYPE[step.type], step.name)
