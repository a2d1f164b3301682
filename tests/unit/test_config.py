from pathlib import Path

import pytest

from hashsafe.config import GuiConfig, HashConfig, HashSafeConfig, load_config


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "hashsafe.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_when_missing(tmp_path):
    config = load_config(tmp_path / "missing.toml")
    assert config == HashSafeConfig()
    assert config.hash.chunk_size == 1024
    assert config.gui.theme == "dark"


def test_partial_override(tmp_path):
    config = load_config(_write(tmp_path, '[gui]\ntheme = "light"\n'))
    assert config.gui == GuiConfig(theme="light")
    assert config.hash == HashConfig()


def test_chunk_size_override(tmp_path):
    config = load_config(_write(tmp_path, "[hash]\nchunk_size = 65536\n"))
    assert config.hash.chunk_size == 65536


@pytest.mark.parametrize(
    "text",
    [
        "[hash]\nchunk_size = 0\n",
        '[gui]\ntheme = "purple"\n',
        "[gui]\npoll_interval_ms = 0\n",
        "[hash]\nalgorithm = 'md5'\n",
        "[output]\nroot_dir = 'x'\n",
        "[hash\n",
        "[hash]\nchunk_size = \"big\"\n",
        "[hash]\nchunk_size = true\n",
        "[gui]\ntheme = 3\n",
        "[gui]\nwidth = 4.5\n",
        "hash = 5\n",
    ],
)
def test_invalid_config(tmp_path, text):
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, text))


def test_unreadable_path(tmp_path):
    with pytest.raises(ValueError, match="cannot read"):
        load_config(tmp_path)
