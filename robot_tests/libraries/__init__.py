"""Robot Framework keyword libraries for the SauceDemo BDD tests.

This package provides keyword libraries that mirror the pytest-bdd step
definitions in tests/step_defs/. Each library uses the @keyword decorator to
map clean Python function names to scenario step text.

Libraries:
    SauceDemoLoginKeywords: Browser lifecycle and login page keywords

Usage:
    *** Settings ***
    Library    robot_tests.libraries.login_keywords.SauceDemoLoginKeywords

    *** Test Cases ***
    Example Test
        Open SauceDemo browser
        Given I am on the SauceDemo login page
        When I enter username "standard_user"
"""

from robot_tests.libraries.login_keywords import SauceDemoLoginKeywords

__all__ = [
    "SauceDemoLoginKeywords",
]
