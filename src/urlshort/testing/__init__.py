"""Test utilities for urlshort applications.

Provides an in-process test client and redirect assertions::

    from urlshort.testing import TestClient, assert_redirect
"""

from urlshort.testing.assertions import assert_not_redirect, assert_redirect
from urlshort.testing.client import TestClient

__all__ = [
    "TestClient",
    "assert_not_redirect",
    "assert_redirect",
]
