"""Tests for the fmtcheck command-line entry point."""

from pathlib import Path

import pytest

from fmtcheck.__main__ import build_parser, main, resolve_config


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty project directory used as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestMain:
    """Exit status and output."""

    def test_clean_project(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (project / "ok.py").write_text('logger.info("%s", name)\n', encoding="utf-8")
        assert main([str(project)]) == 0
        assert "All format strings match" in capsys.readouterr().out

    def test_reports_diagnostics(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = project / "bad.py"
        path.write_text('logger.info("%d %d", 1)\n', encoding="utf-8")
        assert main([str(path)]) == 1
        out = capsys.readouterr().out
        assert f"{path}:1:1: FMT001" in out
        assert "Found 1 format problem(s)" in out

    def test_quiet_prints_only_diagnostics(
        self, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (project / "bad.py").write_text('logger.info("%d %d", 1)\n', encoding="utf-8")
        assert main(["-q", str(project)]) == 1
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 1
        assert "FMT001" in lines[0]

    def test_defaults_to_current_directory(self, project: Path) -> None:
        (project / "bad.py").write_text('"%s" % ()\n', encoding="utf-8")
        assert main([]) == 1

    def test_no_type_check(self, project: Path) -> None:
        (project / "typed.py").write_text('logger.info("%d", "x")\n', encoding="utf-8")
        assert main([str(project)]) == 1
        assert main(["--no-type-check", str(project)]) == 0

    def test_single_flag(self, project: Path) -> None:
        (project / "flags.py").write_text('logger.info("%-+5d", 1)\n', encoding="utf-8")
        assert main([str(project)]) == 0
        assert main(["--single-flag", str(project)]) == 1

    def test_pyproject_in_working_directory(self, project: Path) -> None:
        (project / "pyproject.toml").write_text(
            "[tool.fmtcheck]\ntype-checking = false\n", encoding="utf-8"
        )
        (project / "typed.py").write_text('logger.info("%d", "x")\n', encoding="utf-8")
        assert main([str(project)]) == 0

    def test_explicit_config(self, project: Path) -> None:
        config = project / "lint.toml"
        config.write_text('[tool.fmtcheck]\nlogging-methods = ["audit"]\n', encoding="utf-8")
        (project / "audit.py").write_text('events.audit("%s %s", 1)\n', encoding="utf-8")
        assert main(["--config", str(config), str(project)]) == 1

    def test_bad_config_exit_status(self, project: Path) -> None:
        assert main(["--config", str(project / "missing.toml")]) == 2

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "fmtcheck" in capsys.readouterr().out


class TestResolveConfig:
    """Command-line flags override file settings."""

    def test_flags_override_file(self, project: Path) -> None:
        (project / "pyproject.toml").write_text(
            "[tool.fmtcheck]\nstacked-flags = true\n", encoding="utf-8"
        )
        args = build_parser().parse_args(["--single-flag", "--no-type-check"])
        config = resolve_config(args)
        assert config.stacked_flags is False
        assert config.type_checking is False

    def test_defaults_without_file(self, project: Path) -> None:
        config = resolve_config(build_parser().parse_args([]))
        assert config.stacked_flags is True
        assert config.type_checking is True
