"""Shared fixtures for dirtree tests."""

import pytest

CWD = "/work/project"


@pytest.fixture
def cwd():
    """Fixed working directory so tests do not depend on the environment."""
    return CWD
