"""
SauceDemo login steps and the registry that maps step text to them.

Each handler takes the scenario's browser session as its first argument,
followed by the values extracted from the step's placeholders. The
pytest-bdd bindings (tests/step_defs/login_steps.py) and the Robot Framework
keywords (robot_tests/libraries/login_keywords.py) both call these handlers.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

import parse

from saucedemo_ui.config import get_locator, load_selectors
from saucedemo_ui.exceptions import (
    DuplicateStepError,
    StepNotFoundError,
    StepRegistryError,
)
from saucedemo_ui.session import BrowserSession

logger = logging.getLogger(__name__)

PRECONDITION = "precondition"
ACTION = "action"
OUTCOME = "outcome"
PHASES = (PRECONDITION, ACTION, OUTCOME)

# Gherkin step types as reported by pytest-bdd ("And"/"But" inherit the
# type of the step before them)
PHASE_BY_STEP_TYPE = {"given": PRECONDITION, "when": ACTION, "then": OUTCOME}

StepHandler = Callable[..., None]


@dataclass(frozen=True)
class StepDefinition:
    """A step pattern bound to its handler for one phase."""

    pattern: str
    phase: str
    handler: StepHandler
    _parser: parse.Parser = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.phase not in PHASES:
            raise StepRegistryError(
                f"Unknown phase '{self.phase}' for step '{self.pattern}'"
            )
        object.__setattr__(self, "_parser", parse.compile(self.pattern))

    @property
    def placeholders(self) -> Tuple[str, ...]:
        return tuple(self._parser.named_fields)

    def match(self, text: str) -> Optional[Dict[str, Any]]:
        """Return the placeholder values if ``text`` matches, else None."""
        result = self._parser.parse(text)
        if result is None:
            return None
        return dict(result.named)


class StepRegistry:
    """Registered steps, keyed by phase and pattern."""

    def __init__(self) -> None:
        self._steps: Dict[str, Dict[str, StepDefinition]] = {
            phase: {} for phase in PHASES
        }

    def add(self, definition: StepDefinition) -> StepDefinition:
        phase_steps = self._steps[definition.phase]
        if definition.pattern in phase_steps:
            raise DuplicateStepError(
                f"Step '{definition.pattern}' is already registered "
                f"as a {definition.phase} step"
            )
        phase_steps[definition.pattern] = definition
        return definition

    def step(self, phase: str, pattern: str) -> Callable[[StepHandler], StepHandler]:
        """Decorator registering a handler under ``pattern`` for ``phase``."""

        def decorator(handler: StepHandler) -> StepHandler:
            self.add(StepDefinition(pattern, phase, handler))
            return handler

        return decorator

    def steps(self, phase: Optional[str] = None) -> List[StepDefinition]:
        if phase is None:
            return [d for phase_steps in self._steps.values() for d in phase_steps.values()]
        return list(self._steps[phase].values())

    def match(self, phase: str, text: str) -> Tuple[StepDefinition, Dict[str, Any]]:
        """Resolve exactly one step definition for a scenario line.

        Args:
            phase: Phase of the scenario line (precondition, action or outcome)
            text: Step text without its Given/When/Then keyword

        Returns:
            Tuple of (matching definition, extracted placeholder values)

        Raises:
            StepNotFoundError: No pattern matches
            StepRegistryError: More than one pattern matches
        """
        if phase not in self._steps:
            raise StepRegistryError(f"Unknown phase '{phase}'")

        matches = []
        for definition in self._steps[phase].values():
            values = definition.match(text)
            if values is not None:
                matches.append((definition, values))

        if not matches:
            raise StepNotFoundError(f"No {phase} step matches '{text}'")
        if len(matches) > 1:
            patterns = ", ".join(f"'{d.pattern}'" for d, _ in matches)
            raise StepRegistryError(
                f"Step '{text}' is ambiguous, it matches {patterns}"
            )
        return matches[0]

    def run(self, phase: str, text: str, session: BrowserSession) -> None:
        """Match a scenario line and run its handler against ``session``."""
        definition, values = self.match(phase, text)
        logger.debug("Running %s step '%s' with %s", phase, text, values)
        definition.handler(session, **values)


registry = StepRegistry()


def _locator(selector_path: str) -> Tuple[str, str]:
    return get_locator(load_selectors(), selector_path)


# ============================================================================
# Precondition steps
# ============================================================================

@registry.step(PRECONDITION, "I am on the SauceDemo login page")
def open_login_page(session: BrowserSession) -> None:
    """Navigate the session to the SauceDemo login page."""
    base_url = load_selectors()["base_url"]
    session.navigate(base_url)
    print(f"✓ SauceDemo login page opened at {base_url}")


# ============================================================================
# Action steps
# ============================================================================

@registry.step(ACTION, 'I enter username "{text}"')
def enter_username(session: BrowserSession, text: str) -> None:
    """Clear the username field and type ``text``."""
    session.set_field_value(_locator("login.username_field"), text)
    print(f"✓ Entered username '{text}'")


@registry.step(ACTION, 'I enter password "{text}"')
def enter_password(session: BrowserSession, text: str) -> None:
    """Clear the password field and type ``text``."""
    session.set_field_value(_locator("login.password_field"), text)
    print("✓ Entered password")


@registry.step(ACTION, "I click the login button")
def click_login_button(session: BrowserSession) -> None:
    session.click(_locator("login.login_button"))
    print("✓ Clicked the login button")


# ============================================================================
# Outcome steps
# ============================================================================

@registry.step(OUTCOME, "I should be navigated to the inventory page")
def should_be_on_inventory_page(session: BrowserSession) -> None:
    """Verify the current URL contains the inventory path.

    Waits up to the session timeout for the login redirect to settle before
    reading the URL.
    """
    inventory_path = load_selectors()["inventory"]["path"]
    if not session.wait_for_url_contains(inventory_path):
        raise AssertionError(
            f"Expected URL to contain '{inventory_path}', "
            f"but current URL is '{session.get_current_url()}'"
        )
    print(f"✓ Navigated to inventory page ({session.get_current_url()})")


@registry.step(OUTCOME, 'I should see the error message "{text}"')
def should_see_error_message(session: BrowserSession, text: str) -> None:
    """Verify the error banner text equals ``text`` exactly."""
    actual = session.get_element_text(_locator("login.error_message"))
    if actual != text:
        raise AssertionError(
            f"Expected error message {text!r}, but got {actual!r}"
        )
    print(f"✓ Error message displayed: '{actual}'")
