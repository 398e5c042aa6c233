from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point in a separate interpreter and validates exit
codes, stdout content and written artifacts.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"


def run_cli(args: List[str], home: Path) -> subprocess.CompletedProcess:
    """
    Execute 'python -m fsvisitor.main' with 'src' on PYTHONPATH.

    Args:
        args: Command line arguments.
        home: Directory used as HOME so the user config stays isolated.

    Returns:
        subprocess.CompletedProcess: Result with returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["LOCALAPPDATA"] = str(home)

    return subprocess.run(
        [sys.executable, "-m", "fsvisitor.main"] + args,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_e2e_human_export(isolated_user_dir: Path) -> None:
    result = run_cli(["--use-defaults"], isolated_user_dir)

    assert result.returncode == 0, result.stderr
    assert result.stdout.startswith("Darude - Sandstorm\n\tAlbum:Before the Storm\n")
    assert "\tContent:So close, no matter how far. C...\n" in result.stdout


def test_e2e_xml_export_to_file(isolated_user_dir: Path, tmp_path: Path) -> None:
    target = tmp_path / "out" / "library.xml"
    result = run_cli(["--use-defaults", "-f", "xml", "-o", str(target)], isolated_user_dir)

    assert result.returncode == 0, result.stderr
    content = target.read_text(encoding="utf-8")
    assert content.startswith("<Files>\n\t\t<audio>\n\t\t\t<title>Darude - Sandstorm</title>\n")
    assert content.endswith("\t\t<text>\n</Files>\n")


def test_e2e_bad_format_exits_with_usage_error(isolated_user_dir: Path) -> None:
    result = run_cli(["--format", "yaml"], isolated_user_dir)
    assert result.returncode == 2
    assert "invalid choice" in result.stderr
