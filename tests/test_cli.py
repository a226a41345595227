from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner
from loguru import logger

from bundlelens.cli import main


@pytest.fixture(autouse=True)
def _drop_log_sinks() -> Iterator[None]:
    # The CLI binds a sink to the runner's stderr, which is closed afterwards.
    yield
    logger.remove()


def _write(tmp_path: Path, name: str, payload: object) -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestCli:
    def test_json_output(self, tmp_path: Path) -> None:
        stats = _write(tmp_path, "stats.json", {"modules": [{"name": "src/a.js", "size": 200 * 1024}]})
        result = CliRunner().invoke(main, ["--json", "--config", str(tmp_path / "none.json"), str(stats)])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["totalSize"] == 200 * 1024
        assert payload["modules"][0]["path"] == ["src", "a.js"]
        assert payload["insights"][0]["id"] == "large-dep-module-0"
        assert payload["metadata"]["fileExtensions"] == ["json"]

    def test_tree_output(self, tmp_path: Path) -> None:
        script = tmp_path / "app.js"
        script.write_bytes(b"x" * 10)
        result = CliRunner().invoke(main, ["--tree", "--config", str(tmp_path / "none.json"), str(script)])
        assert result.exit_code == 0, result.output
        tree = json.loads(result.output)
        assert tree["children"][0] == {"name": "app.js", "size": 10, "moduleId": "js-app.js"}

    def test_summary_output(self, tmp_path: Path) -> None:
        script = tmp_path / "app.js"
        script.write_bytes(b"x" * 10)
        result = CliRunner().invoke(main, ["--config", str(tmp_path / "none.json"), str(script)])
        assert result.exit_code == 0, result.output
        assert "Bundle Summary" in result.output

    def test_sample_config(self) -> None:
        result = CliRunner().invoke(main, ["--sample-config"])
        assert result.exit_code == 0
        assert "thresholds" in json.loads(result.output)

    def test_bad_config_exits_2(self, tmp_path: Path) -> None:
        config = tmp_path / "config.json"
        config.write_text("[]", encoding="utf-8")
        script = tmp_path / "app.js"
        script.write_bytes(b"x")
        result = CliRunner().invoke(main, ["--config", str(config), str(script)])
        assert result.exit_code == 2

    def test_no_files_is_usage_error(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(main, ["--config", str(tmp_path / "none.json")])
        assert result.exit_code == 2
        assert "No input files" in result.output
