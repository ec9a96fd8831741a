"""Shared pytest fixtures for devbridge tests.

Transports and file listers are MagicMocks built from the core interfaces,
so no device or bridge executable is needed.
"""

from unittest.mock import MagicMock

import pytest

from devbridge.core.interfaces import Transport, FileLister
from devbridge.domain.deploy import DeployService


@pytest.fixture
def transport():
    """Transport whose shell and push succeed with empty output."""
    mock = MagicMock(spec=Transport)
    mock.shell.return_value = ("", "")
    mock.push.return_value = ("", "")
    return mock


@pytest.fixture
def file_lister():
    mock = MagicMock(spec=FileLister)
    mock.list.return_value = []
    return mock


@pytest.fixture
def service(transport, file_lister):
    return DeployService(transport=transport, file_lister=file_lister)
