"""Step definitions package for BDD tests.

Step modules are loaded as plugins from the root conftest.py so pytest-bdd
can match their steps from any test module.
"""
