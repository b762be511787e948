"""Robot Framework suites and keyword libraries for the SauceDemo login tests."""
