import os
import re
import shutil
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import pytest

RESULT_LINE = re.compile(r"^SHA-256 Hash: ([0-9a-f]{64})$")

pytestmark = pytest.mark.skipif(
    os.environ.get("HASHSAFE_RUN_INTEGRATION") != "1", reason="integration disabled"
)


def _reference_tool() -> Optional[List[str]]:
    if shutil.which("sha256sum"):
        return ["sha256sum"]
    if shutil.which("shasum"):
        return ["shasum", "-a", "256"]
    return None


def _run(*args: str, cwd: Path) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "hashsafe.cli", *args],
        capture_output=True,
        text=True,
        cwd=cwd,
        timeout=60,
    )


@pytest.mark.skipif(_reference_tool() is None, reason="sha256sum/shasum not available")
def test_matches_system_tool(tmp_path: Path) -> None:
    path = tmp_path / "hashsafe_test_file.txt"
    path.write_bytes(b"test_content")
    reference = subprocess.run(
        [*_reference_tool(), str(path)], capture_output=True, text=True, check=True
    )
    expected = reference.stdout.split()[0]

    result = _run("--file", str(path), cwd=tmp_path)

    assert result.returncode == 0
    hash_lines = [line for line in result.stdout.splitlines() if RESULT_LINE.match(line)]
    assert hash_lines == [f"SHA-256 Hash: {expected}"]


def test_missing_file_exit_code(tmp_path: Path) -> None:
    result = _run("--file", str(tmp_path / "missing.txt"), cwd=tmp_path)

    assert result.returncode == 1
    assert "SHA-256 Hash:" not in result.stdout
    assert "Error calculating hash" in result.stderr


def test_cli_flag_without_file(tmp_path: Path) -> None:
    result = _run("--cli", cwd=tmp_path)

    assert result.returncode == 1
    assert "you must specify a file with --file" in result.stderr
