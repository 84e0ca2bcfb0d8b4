"""Tests for fsroutes.cli — CLI entrypoint and argument parsing."""

import importlib
import json
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from fsroutes.cli import main

MakeProject = Callable[..., Path]


@pytest.fixture
def project(make_project: MakeProject) -> Path:
    return make_project(
        "pages/index.tsx",
        "pages/blog/[id].tsx",
        "pages/api/users.ts",
        "app/(marketing)/about/page.tsx",
    )


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_unknown_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--yaml"])
        assert exc_info.value.code == 2


class TestModuleEntry:
    def test_import_does_not_run_cli(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.delitem(sys.modules, "fsroutes.__main__", raising=False)
        monkeypatch.setattr(sys, "argv", ["fsroutes", "--no-such-flag"])
        importlib.import_module("fsroutes.__main__")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestCLITable:
    def test_prints_sorted_table(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--root", str(project)])
        out = capsys.readouterr().out
        assert out.splitlines() == [
            "/\t[pages]\tpages/index.tsx",
            "/about\t[app]\tapp/(marketing)/about/page.tsx",
            "/api/users\t[api]\tpages/api/users.ts",
            "/blog/:id\t[pages]\tpages/blog/[id].tsx",
        ]

    def test_empty_project_prints_nothing(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["--root", str(tmp_path)])
        assert capsys.readouterr().out == ""

    def test_default_root(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main([], default_root=project)
        assert "/blog/:id" in capsys.readouterr().out

    def test_cwd_root(
        self, project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.chdir(project)
        main([])
        assert "pages/index.tsx" in capsys.readouterr().out


class TestCLIJson:
    @pytest.mark.parametrize("flag", ["--json", "-j"])
    def test_json_output(
        self, project: Path, flag: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main([flag, "--root", str(project)])
        data = json.loads(capsys.readouterr().out)
        assert [item["route"] for item in data] == ["/", "/about", "/api/users", "/blog/:id"]
        assert data[0] == {"route": "/", "file": "pages/index.tsx", "type": "pages"}

    def test_json_empty(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--json", "--root", str(tmp_path)])
        assert json.loads(capsys.readouterr().out) == []

    def test_byte_identical_runs(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["-j", "--root", str(project)])
        first = capsys.readouterr().out
        main(["-j", "--root", str(project)])
        assert capsys.readouterr().out == first


class TestCLIErrors:
    def test_missing_root(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--root", str(tmp_path / "nope")])
        assert exc_info.value.code == 1
        assert "Project root not found" in capsys.readouterr().err

    def test_filesystem_error_propagates(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "pages").touch()
        with pytest.raises(NotADirectoryError):
            main(["--root", str(tmp_path)])
        assert capsys.readouterr().out == ""
