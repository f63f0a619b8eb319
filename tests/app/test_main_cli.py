from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from chain_upgrade_exporter import main as main_module
from chain_upgrade_exporter.config import CONFIG_PATH_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path

    from chain_upgrade_exporter.config import ExporterConfig

CONFIG = """
[prometheus]
host = "127.0.0.1"
port = 9100

[chain]
watch_list = ["testnet"]
refresh = "30s"
endpoint = "https://upgrades.example.org/api/upgrades"
"""


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch) -> list[ExporterConfig]:
    configs: list[ExporterConfig] = []

    def fake_run(config: ExporterConfig) -> None:
        configs.append(config)

    monkeypatch.setattr(main_module, "run_exporter", fake_run)
    monkeypatch.setattr(main_module, "configure_logging", lambda **_: None)
    return configs


def test_main_cli_loads_config_flag(tmp_path: Path, captured: list[ExporterConfig]) -> None:
    path = tmp_path / "exporter.toml"
    path.write_text(CONFIG)

    main_module.main(["--config", str(path)])

    assert len(captured) == 1
    assert captured[0].chain.watch_list == frozenset({"testnet"})
    assert captured[0].prometheus.port == 9100


def test_main_cli_uses_environment_path(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, captured: list[ExporterConfig]
) -> None:
    path = tmp_path / "from-env.toml"
    path.write_text(CONFIG)
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(path))

    main_module.main([])

    assert len(captured) == 1


def test_main_cli_exits_on_invalid_config(
    tmp_path: Path, captured: list[ExporterConfig]
) -> None:
    path = tmp_path / "broken.toml"
    path.write_text(CONFIG.replace('"30s"', '"whenever"'))

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["-c", str(path)])

    assert excinfo.value.code == 2
    assert captured == []


def test_main_cli_exits_on_missing_config(
    tmp_path: Path, captured: list[ExporterConfig]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["--config", str(tmp_path / "absent.toml")])

    assert excinfo.value.code == 2


def test_main_cli_exits_on_fatal_runtime_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, captured: list[ExporterConfig]
) -> None:
    path = tmp_path / "exporter.toml"
    path.write_text(CONFIG)

    def failing_run(config: ExporterConfig) -> None:
        raise OSError("address already in use")

    monkeypatch.setattr(main_module, "run_exporter", failing_run)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["--config", str(path)])

    assert excinfo.value.code == 1


def test_main_cli_rejects_unknown_log_level(captured: list[ExporterConfig]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["--log-level", "chatty"])

    assert excinfo.value.code == 2
