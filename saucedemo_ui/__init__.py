"""SauceDemo UI test layer.

Browser session, selector configuration and the login step registry shared
by the pytest-bdd step definitions and the Robot Framework keyword library.
"""

from saucedemo_ui.config import RunSettings
from saucedemo_ui.exceptions import (
    BrowserSetupError,
    ConfigurationError,
    DuplicateStepError,
    ElementNotFoundError,
    NavigationError,
    SauceDemoUIError,
    StepNotFoundError,
    StepRegistryError,
)
from saucedemo_ui.session import BrowserSession
from saucedemo_ui.steps import StepDefinition, StepRegistry, registry

__all__ = [
    "BrowserSession",
    "BrowserSetupError",
    "ConfigurationError",
    "DuplicateStepError",
    "ElementNotFoundError",
    "NavigationError",
    "RunSettings",
    "SauceDemoUIError",
    "StepDefinition",
    "StepNotFoundError",
    "StepRegistry",
    "StepRegistryError",
    "registry",
]
