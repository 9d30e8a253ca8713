"""Test doubles and builders."""

from tests.mocks.pages import make_cwe_page

__all__ = ["make_cwe_page"]
