# File: tests/conftest.py
import pytest


@pytest.fixture(params=[False, True], ids=["sequential", "parallel"])
def parallel(request) -> bool:
    """Run a test once per traversal mode."""
    return request.param
