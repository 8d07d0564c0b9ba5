from unittest.mock import AsyncMock, MagicMock

import pytest

from cf.client import PlatformClient

PLATFORM_METHODS = [
    name
    for name, member in vars(PlatformClient).items()
    if not name.startswith("_") and callable(member)
]


def make_platform_client() -> MagicMock:
    """A platform client whose every remote action is an AsyncMock."""
    client = MagicMock(spec=PLATFORM_METHODS + ["aclose"])
    for name in PLATFORM_METHODS + ["aclose"]:
        setattr(client, name, AsyncMock(return_value=None))
    return client


@pytest.fixture
def platform_client():
    return make_platform_client()


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path, monkeypatch):
    """Keep log files written by setup_logging out of the working tree."""
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
