from collections.abc import Generator

import pytest

from create_taujs import utils
from create_taujs.config import PackageManager, ProjectConfig

# Environment variables that may affect test behavior - clear before each test
_ENV_VARS = [
    "CREATE_TAUJS_LOG_LEVEL",
    "FORCE_COLOR",
    "NO_COLOR",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear environment variables and console state before each test for isolation."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(utils, "_output_config", None)
    yield


@pytest.fixture
def project_config() -> ProjectConfig:
    return ProjectConfig(project_name="demo-app", package_manager=PackageManager.PNPM, install_deps=False)
