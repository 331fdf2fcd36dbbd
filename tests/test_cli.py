"""
CLI: ``quarry scan`` and ``quarry roots``.
"""

import json
import os

import pytest
from click.testing import CliRunner

from quarry.cli.__main__ import cli
from quarry.testing import SCAN_NAMESPACE


@pytest.fixture
def runner(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.startswith("QUARRY_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return CliRunner()


class TestScanCommand:

    def test_lists_names(self, runner, class_tree):
        result = runner.invoke(cli, ["scan", SCAN_NAMESPACE, "-p", str(class_tree)])
        assert result.exit_code == 0, result.output
        lines = sorted(result.output.split())
        assert "io/github/mighten/scan/custom/readme.txt" in lines
        assert "io/github/mighten/scan/custom/level2/Level2Class.class" in lines

    def test_suffix_filter(self, runner, class_tree):
        result = runner.invoke(cli, ["scan", SCAN_NAMESPACE, "-p", str(class_tree), "-s", ".txt"])
        assert result.exit_code == 0
        assert result.output.split() == ["io/github/mighten/scan/custom/readme.txt"]

    def test_classes(self, runner, class_jar, expected_classes):
        result = runner.invoke(cli, ["scan", SCAN_NAMESPACE, "-p", str(class_jar), "--classes"])
        assert result.exit_code == 0
        assert set(result.output.split()) == expected_classes

    def test_classes_with_several_suffixes(self, runner, tmp_path):
        (tmp_path / "cp" / "a").mkdir(parents=True)
        (tmp_path / "cp" / "a" / "B.class").write_bytes(b"")
        (tmp_path / "cp" / "a" / "C.kt").write_bytes(b"")
        result = runner.invoke(
            cli, ["scan", "a", "-p", str(tmp_path / "cp"), "--classes", "-s", ".class", "-s", ".kt"],
        )
        assert result.exit_code == 0, result.output
        assert sorted(result.output.split()) == ["a.B", "a.C"]

    def test_json(self, runner, class_jar):
        result = runner.invoke(cli, ["scan", SCAN_NAMESPACE, "-p", str(class_jar), "--json"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert len(payload) == 4
        assert all(item["base"].endswith("app.jar!") for item in payload)

    def test_config_file_search_path(self, runner, tmp_path, class_tree, expected_classes):
        config = tmp_path / "scan.yaml"
        config.write_text(f"scan:\n  search_path:\n    - '{class_tree.as_posix()}'\n")
        result = runner.invoke(cli, ["-c", str(config), "scan", SCAN_NAMESPACE, "--classes"])
        assert result.exit_code == 0, result.output
        assert set(result.output.split()) == expected_classes

    def test_broken_config_exits_nonzero(self, runner, tmp_path):
        (tmp_path / "quarry.yaml").write_text("scan: [unclosed\n")
        result = runner.invoke(cli, ["scan", "a", "-p", str(tmp_path)])
        assert result.exit_code == 1
        assert "Invalid YAML" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_fault_exits_nonzero(self, runner, tmp_path):
        bad = tmp_path / "broken.jar"
        bad.write_bytes(b"garbage")
        result = runner.invoke(cli, ["scan", "a", "-p", str(bad)])
        assert result.exit_code == 1
        assert "LOCATION_LOOKUP_FAILED" in result.output

    def test_no_results(self, runner, tmp_path):
        result = runner.invoke(cli, ["scan", "no.such", "-p", str(tmp_path)])
        assert result.exit_code == 0
        assert result.output == ""


class TestRootsCommand:

    def test_lists_roots(self, runner, class_tree, class_jar):
        result = runner.invoke(cli, ["roots", SCAN_NAMESPACE, "-p", str(class_tree), "-p", str(class_jar)])
        assert result.exit_code == 0
        assert "(directory)" in result.output
        assert "(archive)" in result.output

    def test_no_roots(self, runner, tmp_path):
        result = runner.invoke(cli, ["roots", "no.such", "-p", str(tmp_path)])
        assert result.exit_code == 0
        assert "(none)" in result.output


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "quarry" in result.output
