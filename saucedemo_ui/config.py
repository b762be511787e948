"""
Run settings and UI selector configuration.

Selectors are loaded from a YAML file shipped with the package so that UI
changes only require editing ``selectors.yaml``. Run settings (browser,
headless mode, wait timeout) come from environment variables and can be
overridden from the pytest command line.
"""

import logging
import os
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from selenium.webdriver.common.by import By

from saucedemo_ui.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SELECTORS_FILE = Path(__file__).parent / "selectors.yaml"

SUPPORTED_BROWSERS = ("chrome", "firefox")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class RunSettings:
    """Browser settings for one test run."""

    browser: str = "chrome"
    headless: bool = True
    timeout: float = 10.0

    def __post_init__(self) -> None:
        if self.browser not in SUPPORTED_BROWSERS:
            raise ConfigurationError(
                f"Unsupported browser '{self.browser}', "
                f"expected one of {', '.join(SUPPORTED_BROWSERS)}"
            )
        if self.timeout <= 0:
            raise ConfigurationError(
                f"Wait timeout must be positive, got {self.timeout}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "RunSettings":
        """Build settings from ``SAUCEDEMO_*`` environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            RunSettings with defaults for anything not set
        """
        env = os.environ if environ is None else environ
        kwargs: Dict[str, Any] = {}

        if env.get("SAUCEDEMO_BROWSER"):
            kwargs["browser"] = env["SAUCEDEMO_BROWSER"].strip().lower()
        if env.get("SAUCEDEMO_HEADLESS"):
            kwargs["headless"] = _parse_bool(
                "SAUCEDEMO_HEADLESS", env["SAUCEDEMO_HEADLESS"]
            )
        if env.get("SAUCEDEMO_TIMEOUT"):
            kwargs["timeout"] = _parse_timeout(
                "SAUCEDEMO_TIMEOUT", env["SAUCEDEMO_TIMEOUT"]
            )

        settings = cls(**kwargs)
        logger.debug("Run settings from environment: %s", settings)
        return settings

    def override(
        self,
        browser: Optional[str] = None,
        headless: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> "RunSettings":
        """Return a copy with any non-None values replaced."""
        changes: Dict[str, Any] = {}
        if browser is not None:
            changes["browser"] = browser.strip().lower()
        if headless is not None:
            changes["headless"] = headless
        if timeout is not None:
            changes["timeout"] = timeout
        return replace(self, **changes)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got '{raw}'")


def _parse_timeout(name: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got '{raw}'") from e


@lru_cache(maxsize=None)
def load_selectors(path: Path = SELECTORS_FILE) -> Dict[str, Any]:
    """Load UI selectors from YAML configuration.

    Args:
        path: Selector file to read

    Returns:
        Dictionary of selectors organized by page
    """
    try:
        with open(path, encoding="utf-8") as f:
            selectors = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot load selectors from {path}: {e}") from e

    if not isinstance(selectors, dict) or "base_url" not in selectors:
        raise ConfigurationError(f"Selector file {path} has no base_url")

    logger.debug("Loaded selectors from %s", path)
    return selectors


def get_locator(selectors: Dict[str, Any], selector_path: str) -> Tuple[str, str]:
    """Get a Selenium locator from configuration.

    Args:
        selectors: Selector dictionary from ``load_selectors()``
        selector_path: Dot-notation path to selector (e.g., "login.username_field")

    Returns:
        Tuple of (By.TYPE, selector_string)

    Example:
        locator = get_locator(selectors, "login.login_button")
        # Returns: (By.CSS_SELECTOR, "#login-button")
    """
    value: Any = selectors
    for part in selector_path.split("."):
        try:
            value = value[part]
        except (KeyError, TypeError) as e:
            raise ConfigurationError(f"Unknown selector '{selector_path}'") from e

    try:
        by_type = getattr(By, value["by"].upper())
    except (AttributeError, KeyError, TypeError) as e:
        raise ConfigurationError(
            f"Selector '{selector_path}' has an invalid 'by' entry"
        ) from e

    return (by_type, value["selector"])
