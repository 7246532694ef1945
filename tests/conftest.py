from __future__ import annotations

import io

import pytest
from rich.console import Console

from create_interwoven_app.core.logs import ScaffoldLogger


@pytest.fixture
def quiet_logger() -> ScaffoldLogger:
    """Logger that records messages without printing them to the terminal."""
    return ScaffoldLogger(Console(file=io.StringIO(), width=200), verbose=True)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("CREATE_INTERWOVEN_APP_HOME", str(home))
    monkeypatch.setenv("CREATE_INTERWOVEN_APP_DISABLE_BANNER", "1")
    for name in (
        "CREATE_INTERWOVEN_APP_TEMPLATES_DIR",
        "CREATE_INTERWOVEN_APP_MAINNET_REGISTRY_URL",
        "CREATE_INTERWOVEN_APP_TESTNET_REGISTRY_URL",
        "CREATE_INTERWOVEN_APP_INSTALL_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
