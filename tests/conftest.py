import pytest
from click.testing import CliRunner

from typst_writer.filesystem import MAX_FILE_SIZE_ENV_VAR


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clear_size_limit(monkeypatch):
    """Keep a size limit exported in the host environment out of the tests."""
    monkeypatch.delenv(MAX_FILE_SIZE_ENV_VAR, raising=False)
