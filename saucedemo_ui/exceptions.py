"""Custom exceptions for the SauceDemo UI test layer."""


class SauceDemoUIError(Exception):
    """Base exception for all UI test failures."""


class BrowserSetupError(SauceDemoUIError):
    """Browser initialization failed."""


class ConfigurationError(SauceDemoUIError):
    """Run settings or selector configuration is invalid."""


class NavigationError(SauceDemoUIError):
    """Target page was unreachable or the browser landed on the wrong URL."""


class ElementNotFoundError(SauceDemoUIError):
    """Element was not found on the page within the wait window."""

    def __init__(self, selector: str, timeout: float) -> None:
        super().__init__(
            f"Element '{selector}' not found within {timeout}s"
        )
        self.selector = selector
        self.timeout = timeout


class StepRegistryError(SauceDemoUIError):
    """Base exception for step registration and matching."""


class DuplicateStepError(StepRegistryError):
    """A step pattern is already registered for the same phase."""


class StepNotFoundError(StepRegistryError):
    """No registered step pattern matches the scenario line."""
