from __future__ import annotations

import sys

from pathlib import Path

import pytest
import yaml

from zinc.cli import _scan_flags, main
from zinc.constants import IMPORT_MARKER, VERSION

SCRIPT = f"{IMPORT_MARKER}\nmain() {{\n    return 0;\n}}\n"

FAKE_COMPILER = (
    "import os, sys\n"
    "out = sys.argv[sys.argv.index('-o') + 1]\n"
    "with open(out, 'w') as fh:\n"
    "    fh.write('#!/bin/sh\\necho compiled-ok\\n')\n"
    "os.chmod(out, 0o755)\n"
)
FAILING_COMPILER = "import sys; sys.stderr.write('boom\\n'); sys.exit(1)"

posix_only = pytest.mark.skipif(
    sys.platform == "win32", reason="fake binaries are shell scripts"
)


@pytest.fixture()
def workspace(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ZINC_CXX", raising=False)
    monkeypatch.delenv("ZINC_CXXFLAGS", raising=False)
    (tmp_path / "demo.zn").write_text(SCRIPT, encoding="utf-8")
    return tmp_path


def _config(workspace: Path, compiler_code: str) -> str:
    path = workspace / "zinc.yaml"
    path.write_text(
        yaml.safe_dump(
            {"toolchain": {"compiler": [sys.executable, "-c", compiler_code]}}
        ),
        encoding="utf-8",
    )
    return str(path)


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["demo.zn"], (False, False)),
        (["demo.zn", "-k"], (True, False)),
        (["demo.zn", "--verbose", "--keep-translation"], (True, True)),
        (["demo.zn", "-x", "-v"], (False, True)),
        (["demo.zn", "-x", "-y", "-k"], (False, False)),
        (["-k", "demo.zn"], (False, False)),
    ],
)
def test_scan_flags_only_checks_slots_after_script(argv, expected):
    assert _scan_flags(argv) == expected


@posix_only
def test_cli_builds_runs_and_cleans_up(workspace: Path, capfd):
    config = _config(workspace, FAKE_COMPILER)
    assert main(["./demo.zn", "--config", config]) == 0
    out = capfd.readouterr().out
    assert "compiled-ok" in out
    assert not (workspace / "zinc_to.cpp").exists()
    assert (workspace / "zinc_output").exists()


@posix_only
def test_cli_keep_translation(workspace: Path, capfd):
    config = _config(workspace, FAKE_COMPILER)
    assert main(["demo.zn", "-k", "--config", config]) == 0
    kept = (workspace / "zinc_to.cpp").read_text(encoding="utf-8")
    assert kept.endswith("int main() {\n    return 0;\n}\n")
    assert "compiled-ok" in capfd.readouterr().out


@posix_only
def test_cli_ignores_flags_past_third_slot(workspace: Path, capfd):
    config = _config(workspace, FAKE_COMPILER)
    assert main(["demo.zn", "--config", config, "-k"]) == 0
    assert not (workspace / "zinc_to.cpp").exists()


@posix_only
def test_cli_verbose_progress_lines(workspace: Path, capfd):
    config = _config(workspace, FAKE_COMPILER)
    assert main(["demo.zn", "-v", "--no-color", "--config", config]) == 0
    out = capfd.readouterr().out
    assert "| Verbose output: [True]" in out
    assert "| Keep translation: [False]" in out
    assert f"| Full path [{workspace / 'demo.zn'}]" in out
    assert "| Compilation successful." in out
    assert "| Running the program..." in out
    assert "[VERBOSE] Compiling with: " in out


def test_cli_quiet_by_default(workspace: Path, capfd):
    config = _config(workspace, FAILING_COMPILER)
    main(["demo.zn", "--config", config])
    assert "Verbose output" not in capfd.readouterr().out


def test_cli_compile_failure_exits_cleanly(workspace: Path, capfd):
    config = _config(workspace, FAILING_COMPILER)
    assert main(["demo.zn", "--config", config]) == 0
    captured = capfd.readouterr()
    assert "Compilation failed" in captured.err
    assert "boom" in captured.err
    assert (workspace / "zinc_to.cpp").exists()
    assert not (workspace / "zinc_output").exists()


def test_cli_missing_input(workspace: Path, capsys):
    assert main(["nope.zn"]) == 1
    captured = capsys.readouterr()
    assert "does not exist" in captured.err
    assert str(workspace / "nope.zn") in captured.err


def test_cli_invalid_source(workspace: Path, capsys):
    (workspace / "bad.zn").write_text("main() {\n}\n", encoding="utf-8")
    assert main(["bad.zn"]) == 2
    captured = capsys.readouterr()
    assert "Not a valid ZINC file" in captured.out
    assert not (workspace / "zinc_to.cpp").exists()


def test_cli_missing_config(workspace: Path, capsys):
    assert main(["demo.zn", "--config", "missing.yaml"]) == 1
    assert "not found" in capsys.readouterr().err


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert f"zinc (ZINC) {VERSION}" in capsys.readouterr().out


def test_cli_requires_source(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code != 0


@posix_only
def test_cli_keeps_latin1_bytes(workspace: Path, capfd):
    (workspace / "latin1.zn").write_bytes(
        b"using zincstd;\nmain() { // caf\xe9\n    return 0;\n}\n"
    )
    config = _config(workspace, FAKE_COMPILER)
    assert main(["latin1.zn", "-k", "--config", config]) == 0
    kept = (workspace / "zinc_to.cpp").read_bytes()
    assert b"int main() { // caf\xe9\n" in kept
    assert "compiled-ok" in capfd.readouterr().out


def test_cli_reports_unrunnable_binary(workspace: Path, capfd):
    config = _config(workspace, "pass")
    assert main(["demo.zn", "--config", config]) == 0
    err = capfd.readouterr().err
    assert "Failed to run the program" in err
    assert not (workspace / "zinc_to.cpp").exists()
