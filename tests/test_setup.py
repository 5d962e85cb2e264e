"""
Verify project setup is correct.
"""

import lmbridge


def test_version_exists():
    """Package has version."""
    assert hasattr(lmbridge, "__version__")
    assert lmbridge.__version__ == "0.1.0"
