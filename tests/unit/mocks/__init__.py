"""Mock classes for unit testing step definitions."""

from .mock_session import MockBrowserSession

__all__ = [
    "MockBrowserSession",
]
