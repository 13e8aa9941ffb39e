"""Test utilities for combo applications.

    from combo.testing import TestClient
"""

from combo.testing.client import TestClient

__all__ = ["TestClient"]
