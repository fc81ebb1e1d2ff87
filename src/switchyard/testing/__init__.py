"""Test utilities for switchyard.

    from switchyard.testing import TestClient
"""

from switchyard.testing.client import TestClient

__all__ = ["TestClient"]
