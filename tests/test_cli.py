"""Tests for the CLI module, run in-process."""

import os

import pytest

from finlog import cli
from finlog.config import LOG_FILENAME
from finlog.errors import FlushError


def _argv(tmp_path, *extra):
    return ["--count", "8", "--time-range", "0", "--directory", str(tmp_path), *extra]


class TestBuildParser:
    def test_flags_default_to_unset(self):
        args = cli.build_parser().parse_args([])
        assert args.count is None
        assert args.time_range is None
        assert args.force is None
        assert args.show_progress is None

    def test_type_choices(self):
        args = cli.build_parser().parse_args(["--type", "CommaDelimeter"])
        assert args.log_type == "CommaDelimeter"

    def test_invalid_type_exits(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["--type", "Tabs"])


class TestMain:
    def test_success(self, tmp_path, clean_env, capsys):
        assert cli.main(_argv(tmp_path)) == cli.EXIT_OK
        out = capsys.readouterr().out
        assert "Added 8 entries" in out
        with open(os.path.join(str(tmp_path), LOG_FILENAME)) as f:
            assert len(f.read().splitlines()) == 8

    def test_config_error(self, tmp_path, clean_env):
        assert cli.main(_argv(tmp_path, "--count", "20000")) == cli.EXIT_USAGE

    def test_yaml_config(self, tmp_path, clean_env, capsys):
        cfg = tmp_path / "finlog.yml"
        cfg.write_text(f"generator:\n  count: 3\n  time_range: 0\n  directory: {tmp_path}\n")
        assert cli.main(["--config", str(cfg)]) == cli.EXIT_OK
        assert "Added 3 entries" in capsys.readouterr().out

    def test_provision_failure(self, tmp_path, clean_env):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        argv = ["--count", "2", "--time-range", "0", "--directory", str(blocker / "x")]
        assert cli.main(argv) == cli.EXIT_FAILED

    def test_interrupt(self, tmp_path, clean_env, monkeypatch):
        def _interrupt(self):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli.PacedWriter, "run", _interrupt)
        assert cli.main(_argv(tmp_path)) == cli.EXIT_INTERRUPTED

    def test_flush_failure_exit_code(self, tmp_path, clean_env, monkeypatch):
        def _fail(self):
            raise FlushError(self.output_path, "Permission denied")

        monkeypatch.setattr(cli.PacedWriter, "run", _fail)
        assert cli.main(_argv(tmp_path)) == cli.EXIT_FAILED
