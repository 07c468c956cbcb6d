"""Test container helpers."""

from .container import build_test_container, make_test_settings

__all__ = [
    "build_test_container",
    "make_test_settings",
]
