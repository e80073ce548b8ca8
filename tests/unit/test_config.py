from pathlib import Path

import pytest

from polyrecover import config as config_module
from polyrecover.config import AppConfig, dump_default_config, load_config
from polyrecover.errors import ConfigError
from polyrecover.interpolation import GaussianSolver, LagrangeSolver


@pytest.fixture(autouse=True)
def _isolated_search_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "runtime_config_dir", lambda: tmp_path / "user-config")


def test_defaults_without_files() -> None:
    config = load_config()
    assert config == AppConfig()
    assert config.logging.normalized_level() == "INFO"
    assert isinstance(config.solver.build_solver(), LagrangeSolver)
    assert config.solver.workers == 1


def test_explicit_file(tmp_path: Path) -> None:
    target = tmp_path / "custom.yaml"
    target.write_text("logging:\n  level: debug\nsolver:\n  method: vandermonde\n  workers: 4\n", encoding="utf-8")
    config = load_config(target)
    assert config.logging.normalized_level() == "DEBUG"
    assert config.solver.method == "gauss"
    assert isinstance(config.solver.build_solver(), GaussianSolver)
    assert config.solver.workers == 4


def test_project_file_discovered(tmp_path: Path) -> None:
    project = tmp_path / ".polyrecover" / "config.yaml"
    project.parent.mkdir()
    project.write_text("solver:\n  method: gauss\n", encoding="utf-8")
    assert load_config().solver.method == "gauss"


@pytest.mark.parametrize(
    "content",
    [
        "solver:\n  method: newton\n",
        "solver:\n  workers: 0\n",
        "logging:\n  level: loud\n",
        "solver: [unclosed\n",
    ],
)
def test_invalid_file_rejected(tmp_path: Path, content: str) -> None:
    target = tmp_path / "bad.yaml"
    target.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(target)


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.yaml")


def test_dump_default_config_round_trips(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "config.yaml"
    dump_default_config(target)
    assert load_config(target) == AppConfig()
