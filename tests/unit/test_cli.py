import hashlib
import re

import pytest

from hashsafe import cli

RESULT_LINE = re.compile(r"^SHA-256 Hash: [0-9a-f]{64}$")


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    """Keep a stray hashsafe.toml in the repo from leaking into tests."""
    monkeypatch.chdir(tmp_path)


def test_file_prints_status_and_result(tmp_path, capsys):
    path = tmp_path / "hashsafe_test_file.txt"
    path.write_bytes(b"test_content")

    assert cli.main(["--file", str(path)]) == 0

    out, err = capsys.readouterr()
    lines = out.splitlines()
    assert lines[0] == f"Calculating hash for: {path}"
    assert lines[1] == f"SHA-256 Hash: {hashlib.sha256(b'test_content').hexdigest()}"
    assert RESULT_LINE.match(lines[1])
    assert err == ""


def test_short_flags(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")

    assert cli.main(["-c", "-f", str(path)]) == 0

    out, _ = capsys.readouterr()
    assert (
        "SHA-256 Hash: e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        in out.splitlines()
    )


def test_missing_file_fails(tmp_path, capsys):
    missing = tmp_path / "nope.txt"

    assert cli.main(["--file", str(missing)]) == 1

    out, err = capsys.readouterr()
    assert "SHA-256 Hash:" not in out
    assert err.startswith("Error calculating hash: file not found")
    assert str(missing) in err


def test_cli_without_file_fails(capsys):
    assert cli.main(["--cli"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "In CLI mode, you must specify a file with --file" in err


def test_no_flags_launches_gui(monkeypatch):
    calls = []

    def fake_gui(config):
        calls.append(config)
        return 0

    monkeypatch.setattr(cli, "_run_gui", fake_gui)
    assert cli.main([]) == 0
    assert len(calls) == 1


def test_gui_failure_exit_code(monkeypatch):
    monkeypatch.setattr(cli, "_run_gui", lambda config: 1)
    assert cli.main([]) == 1


def test_chunk_size_from_config(tmp_path, capsys):
    config_path = tmp_path / "custom.toml"
    config_path.write_text("[hash]\nchunk_size = 3\n", encoding="utf-8")
    path = tmp_path / "data.bin"
    path.write_bytes(b"0123456789" * 10)

    assert cli.main(["--config", str(config_path), "--file", str(path)]) == 0

    out, _ = capsys.readouterr()
    assert f"SHA-256 Hash: {hashlib.sha256(path.read_bytes()).hexdigest()}" in out


def test_bad_config_fails(tmp_path, capsys):
    config_path = tmp_path / "bad.toml"
    config_path.write_text("[hash]\nchunk_size = 0\n", encoding="utf-8")
    path = tmp_path / "data.bin"
    path.write_bytes(b"x")

    assert cli.main(["--config", str(config_path), "--file", str(path)]) == 1

    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("Error loading config:")


def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        cli.main(["--version"])
    assert info.value.code == 0
    assert capsys.readouterr().out.startswith("hashsafe ")


@pytest.mark.parametrize(
    "text", ['[hash]\nchunk_size = "big"\n', "hash = 5\n", "[gui]\ntheme = false\n"]
)
def test_badly_typed_config_fails(tmp_path, capsys, text):
    config_path = tmp_path / "typed.toml"
    config_path.write_text(text, encoding="utf-8")
    path = tmp_path / "data.bin"
    path.write_bytes(b"x")

    assert cli.main(["--config", str(config_path), "--file", str(path)]) == 1

    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("Error loading config:")


def test_config_directory_fails(tmp_path, capsys):
    path = tmp_path / "data.bin"
    path.write_bytes(b"x")

    assert cli.main(["--config", str(tmp_path), "--file", str(path)]) == 1
    assert capsys.readouterr().err.startswith("Error loading config: cannot read")
