"""Tests for the command line interface."""

import io
from pathlib import Path

import numpy as np
import pytest

from pager_module.cli import create_parser, main
from pager_module.core.config import EncoderConfig, Protocol, get_preset


@pytest.fixture(autouse=True)
def stdin(monkeypatch):
    """Replace stdin with an empty pipe."""
    pipe = io.StringIO("")
    monkeypatch.setattr("sys.stdin", pipe)
    return pipe


@pytest.fixture(autouse=True)
def home(tmp_path, monkeypatch):
    """Point the default configuration path into a temporary home."""
    home_dir = tmp_path / "home"
    monkeypatch.setattr(Path, "home", lambda: home_dir)
    return home_dir


class TestParser:
    """Tests for argument parsing."""

    def test_encode_arguments(self):
        args = create_parser().parse_args(
            ["encode", "911", "-p", "flex", "-c", "1337331", "-t", "numeric"]
        )
        assert args.command == "encode"
        assert args.text == "911"
        assert args.protocol == "flex"
        assert args.capcode == 1337331
        assert args.type == "numeric"


class TestCommands:
    """Tests for command execution."""

    def test_info(self, capsys):
        assert main(["info"]) == 0
        assert "POCSAG" in capsys.readouterr().out

    def test_no_command_shows_info(self, capsys):
        assert main([]) == 0
        assert "FLEX" in capsys.readouterr().out

    def test_encode_to_file(self, tmp_path):
        """Test encoded symbols are written as int8."""
        output = tmp_path / "page.bin"
        assert main(["encode", "hello", "-o", str(output)]) == 0

        symbols = np.fromfile(output, dtype=np.int8)
        assert len(symbols) == (576 + 17 * 32) * 4
        assert symbols[0] == -1

    def test_encode_flex(self, tmp_path):
        output = tmp_path / "flex.bin"
        code = main(
            [
                "encode", "69",
                "-p", "flex", "-c", "1337331", "-t", "numeric",
                "-o", str(output),
            ]
        )
        assert code == 0
        assert len(np.fromfile(output, dtype=np.int8)) == 120000

    def test_encode_preset(self, tmp_path):
        output = tmp_path / "preset.bin"
        assert main(["encode", "--preset", "flex_1600", "-o", str(output)]) == 0
        assert len(np.fromfile(output, dtype=np.int8)) == 120000

    def test_bad_symbol_rate(self, capsys):
        assert main(["encode", "hello", "--symbol-rate", "6401"]) == 1
        assert "Error" in capsys.readouterr().out

    def test_unsupported_flex_type(self):
        assert main(["encode", "hi", "-p", "flex", "-c", "1337331", "-t", "alpha"]) == 1

    def test_save_and_load_config(self, tmp_path):
        """Test --save-config output can be fed back with --config."""
        path = tmp_path / "page.json"
        assert main(["encode", "1234", "-t", "numeric", "--save-config", str(path)]) == 0

        config = EncoderConfig.load(str(path))
        assert config.protocol == Protocol.POCSAG
        assert config.message == "1234"

        assert main(["encode", "--config", str(path)]) == 0

    def test_missing_config(self, tmp_path):
        assert main(["encode", "--config", str(tmp_path / "none.json")]) == 1

    def test_message_from_stdin(self, tmp_path, monkeypatch):
        """Test text is read from stdin when no argument is given."""
        monkeypatch.setattr("sys.stdin", io.StringIO("911\n"))
        path = tmp_path / "page.json"
        assert main(["encode", "-t", "numeric", "--save-config", str(path)]) == 0
        assert EncoderConfig.load(str(path)).message == "911"

    def test_empty_message_argument(self, tmp_path):
        """Test an explicit empty message replaces the default text."""
        path = tmp_path / "page.json"
        assert main(["encode", "", "--save-config", str(path)]) == 0
        assert EncoderConfig.load(str(path)).message == ""

    def test_flex_without_type(self, tmp_path):
        """Test -p flex alone encodes the FLEX defaults."""
        output = tmp_path / "flex.bin"
        assert main(["encode", "-p", "flex", "-o", str(output)]) == 0
        assert len(np.fromfile(output, dtype=np.int8)) == 120000

    def test_flex_without_type_keeps_overrides(self, tmp_path):
        path = tmp_path / "page.json"
        code = main(
            ["encode", "911", "-p", "flex", "-c", "40000", "--save-config", str(path)]
        )
        assert code == 0
        config = EncoderConfig.load(str(path))
        assert config.protocol == Protocol.FLEX
        assert config.capcode == 40000
        assert config.message == "911"


class TestDefaultConfig:
    """Tests for the per-user default configuration file."""

    def test_default_file_used(self, home, tmp_path):
        """Test encode falls back to the saved default configuration."""
        path = home / ".config" / "pager_module" / "config.json"
        path.parent.mkdir(parents=True)
        assert get_preset("flex_1600").save(str(path))

        output = tmp_path / "page.bin"
        assert main(["encode", "-o", str(output)]) == 0
        assert len(np.fromfile(output, dtype=np.int8)) == 120000

    def test_invalid_default_file(self, home, tmp_path):
        """Test a broken default file falls back to built-in defaults."""
        path = home / ".config" / "pager_module" / "config.json"
        path.parent.mkdir(parents=True)
        path.write_text("{not json")

        output = tmp_path / "page.bin"
        assert main(["encode", "-o", str(output)]) == 0
        assert len(np.fromfile(output, dtype=np.int8)) == (576 + 17 * 32) * 4

    def test_no_default_file(self, home):
        """Test nothing is created under the home directory."""
        assert main(["encode", "hello"]) == 0
        assert not home.exists()
