"""Tests for the command-line entry point."""

import logging
import re

import pytest

from haikunator.main import UsageError, parse_args, run


class TestParseArgs:
    """Tests for parse_args."""

    def test_defaults(self):
        assert parse_args([]) == {"count": 1}

    def test_all_options(self):
        options = parse_args([
            "-n", "3", "-c", "conf.yaml", "-d", ".", "-l", "6",
            "--hex", "--chars", "abc", "-s", "42",
        ])
        assert options == {
            "count": 3,
            "config": "conf.yaml",
            "delimiter": ".",
            "token_length": 6,
            "token_hex": True,
            "token_chars": "abc",
            "seed": 42,
        }

    def test_unknown_option(self):
        with pytest.raises(UsageError, match="Unknown option"):
            parse_args(["--nope"])

    def test_missing_value(self):
        with pytest.raises(UsageError, match="requires a value"):
            parse_args(["--count"])

    def test_bad_integer(self):
        with pytest.raises(UsageError, match="integer"):
            parse_args(["--length", "four"])

    def test_negative_count(self):
        with pytest.raises(UsageError):
            parse_args(["-n", "-1"])

    def test_help_anywhere(self):
        assert parse_args(["-n", "2", "-h"])["help"] is True
        assert parse_args(["--hex", "--help"])["help"] is True


class TestRun:
    """Tests for run."""

    def test_prints_one_name(self, capsys):
        assert run([]) == 0
        out = capsys.readouterr().out
        assert re.match(r"^\w+-\w+-[0-9]{4}\n$", out)

    def test_prints_count_names(self, capsys):
        assert run(["-n", "5", "--hex", "-l", "8"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 5
        for line in lines:
            assert re.match(r"^\w+-\w+-[0-9a-f]{8}$", line)

    def test_seed_is_reproducible(self, capsys):
        run(["-n", "3", "-s", "42"])
        first = capsys.readouterr().out
        run(["-n", "3", "-s", "42"])
        second = capsys.readouterr().out
        assert first == second

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "haikunator.yaml"
        path.write_text(
            "generator:\n  adjectives: [flying]\n  nouns: [bat]\n  token_length: 0\n",
            encoding="utf-8",
        )
        assert run(["-c", str(path)]) == 0
        assert capsys.readouterr().out == "flying-bat\n"

    def test_flags_override_config(self, tmp_path, capsys):
        path = tmp_path / "haikunator.yaml"
        path.write_text("generator:\n  delimiter: '.'\n", encoding="utf-8")
        assert run(["-c", str(path), "-d", "@"]) == 0
        assert re.match(r"^\w+@\w+@[0-9]{4}$", capsys.readouterr().out.strip())

    def test_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("HAIKUNATOR_TOKEN_LENGTH", "0")
        assert run([]) == 0
        assert re.match(r"^\w+-\w+$", capsys.readouterr().out.strip())

    def test_usage_error(self, capsys):
        assert run(["--bogus"]) == 2
        err = capsys.readouterr().err
        assert "Unknown option" in err
        assert "Usage:" in err

    def test_invalid_settings(self, capsys):
        assert run(["-l", "-1"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_missing_config(self, tmp_path, capsys):
        assert run(["-c", str(tmp_path / "nope.yaml")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_help(self, capsys):
        assert run(["--help"]) == 0
        assert "Usage:" in capsys.readouterr().out

    def test_help_after_other_options(self, capsys):
        assert run(["-n", "2", "-h"]) == 0
        out = capsys.readouterr().out
        assert "Usage:" in out
        assert not re.search(r"^\w+-\w+-[0-9]{4}$", out, re.MULTILINE)

    def test_config_typo_is_an_error(self, tmp_path, capsys):
        path = tmp_path / "haikunator.yaml"
        path.write_text("generator:\n  token_lenght: 8\n", encoding="utf-8")
        assert run(["-c", str(path)]) == 1
        assert "token_lenght" in capsys.readouterr().err

    def test_logs_loaded_config_at_info(self, tmp_path, caplog):
        """The config file's logging level applies to messages about loading it."""
        path = tmp_path / "haikunator.yaml"
        path.write_text("logging:\n  level: INFO\n", encoding="utf-8")
        with caplog.at_level(logging.NOTSET):
            assert run(["-c", str(path)]) == 0
        messages = [r.getMessage() for r in caplog.records if r.name == "haikunator.main"]
        assert f"Loaded config from {path}" in messages
        assert logging.getLogger("haikunator").level == logging.INFO

    def test_default_log_level_is_warning(self, tmp_path):
        path = tmp_path / "haikunator.yaml"
        path.write_text("generator:\n  delimiter: '.'\n", encoding="utf-8")
        assert run(["-c", str(path)]) == 0
        assert logging.getLogger("haikunator").level == logging.WARNING
