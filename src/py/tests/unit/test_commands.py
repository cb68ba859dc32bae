"""Tests for create_taujs.commands module."""

import json
from pathlib import Path
from unittest.mock import Mock

import pytest

from create_taujs.commands import create_project, print_next_steps
from create_taujs.config import LoggingConfig, PackageManager, ProjectConfig
from create_taujs.exceptions import DestinationExistsError, InstallError
from create_taujs.executor import InstallOutcome
from create_taujs.utils import configure_output


@pytest.fixture
def mock_install(monkeypatch: pytest.MonkeyPatch) -> Mock:
    mock = Mock(return_value=InstallOutcome(success=True))
    monkeypatch.setattr("create_taujs.commands.install_dependencies", mock)
    return mock


def test_create_project_without_install(
    tmp_path: Path, project_config: ProjectConfig, mock_install: Mock, capsys: pytest.CaptureFixture[str]
) -> None:
    target = create_project(project_config, cwd=tmp_path)

    assert target == (tmp_path / "demo-app").resolve()
    assert json.loads((target / "package.json").read_text(encoding="utf-8"))["name"] == "demo-app"
    mock_install.assert_not_called()

    output = capsys.readouterr().out
    assert "Project files created" in output
    assert "created successfully!" in output
    assert "cd demo-app" in output
    assert "pnpm install" in output
    assert "pnpm run dev" in output
    assert "https://taujs.dev" in output


def test_create_project_with_install(tmp_path: Path, mock_install: Mock, capsys: pytest.CaptureFixture[str]) -> None:
    config = ProjectConfig("demo-app", PackageManager.YARN, install_deps=True)

    target = create_project(config, cwd=tmp_path)

    mock_install.assert_called_once_with(PackageManager.YARN, target)
    output = capsys.readouterr().out
    assert "Dependencies installed" in output
    assert "yarn run dev" in output
    assert "  yarn\n" not in output


def test_create_project_install_failure_is_a_warning(
    tmp_path: Path, mock_install: Mock, capsys: pytest.CaptureFixture[str]
) -> None:
    mock_install.return_value = InstallOutcome(success=False, error=InstallError(["npm", "install"], 1))
    config = ProjectConfig("demo-app", PackageManager.NPM, install_deps=True)

    target = create_project(config, cwd=tmp_path)

    assert (target / "package.json").is_file()
    output = capsys.readouterr().out
    assert "Failed to install dependencies (Command ['npm', 'install'] failed with return code 1.)" in output
    assert "You can install them manually." in output
    assert "created successfully!" in output


def test_create_project_existing_destination(tmp_path: Path, project_config: ProjectConfig, mock_install: Mock) -> None:
    (tmp_path / "demo-app").mkdir()

    with pytest.raises(DestinationExistsError, match="Directory demo-app already exists"):
        create_project(project_config, cwd=tmp_path)

    assert list((tmp_path / "demo-app").iterdir()) == []
    mock_install.assert_not_called()


def test_create_project_defaults_to_current_directory(
    tmp_path: Path, project_config: ProjectConfig, monkeypatch: pytest.MonkeyPatch, mock_install: Mock
) -> None:
    monkeypatch.chdir(tmp_path)
    target = create_project(project_config)
    assert target.parent == tmp_path.resolve()


def test_create_project_quiet_output(
    tmp_path: Path, project_config: ProjectConfig, mock_install: Mock, capsys: pytest.CaptureFixture[str]
) -> None:
    configure_output(LoggingConfig(level="quiet"))

    create_project(project_config, cwd=tmp_path)

    output = capsys.readouterr().out
    assert "Creating project in" not in output
    assert "cd demo-app" in output


def test_create_project_verbose_lists_files(
    tmp_path: Path, project_config: ProjectConfig, mock_install: Mock, capsys: pytest.CaptureFixture[str]
) -> None:
    configure_output(LoggingConfig(level="verbose"))

    create_project(project_config, cwd=tmp_path)

    output = capsys.readouterr().out
    assert "Created " in output
    assert "favicon.svg" in output


@pytest.mark.parametrize(
    ("package_manager", "install"),
    [
        (PackageManager.NPM, "npm install"),
        (PackageManager.PNPM, "pnpm install"),
        (PackageManager.YARN, "yarn"),
        (PackageManager.BUN, "bun install"),
    ],
)
def test_print_next_steps_install_command(
    package_manager: PackageManager, install: str, capsys: pytest.CaptureFixture[str]
) -> None:
    print_next_steps(ProjectConfig("demo-app", package_manager, install_deps=False))

    output = capsys.readouterr().out
    assert f"  cd demo-app\n  {install}\n  {package_manager.value} run dev\n" in output
