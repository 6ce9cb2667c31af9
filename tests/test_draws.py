"""Draw report and command line harness tests."""

import json
import subprocess
import sys
from pathlib import Path

import pytest

from pcg_random import DrawConfig, GeneratorState, run_draws
from scripts import run_draws as run_draws_cli


def test_default_report_matches_reference_prefix():
    result = run_draws(DrawConfig(count=4))
    assert result["draws"] == [
        "0xa15c02b71a410f65",
        "0x7b47f409e0b09a53",
        "0xba1d333011fba8ac",
        "0x83d2f293452993e9",
    ]


def test_report_is_deterministic():
    cfg = DrawConfig(seed1=0xDEADBEEF, seed2=7, seq1=1, seq2=2, count=16, advance=-3)
    assert run_draws(cfg) == run_draws(cfg)


def test_advance_offsets_the_draws():
    full = run_draws(DrawConfig(count=12))
    skipped = run_draws(DrawConfig(count=4, advance=8))
    assert skipped["draws"] == full["draws"][8:]
    assert skipped["final"] == full["final"]


def test_report_states_round_trip():
    result = run_draws(DrawConfig(count=0))
    assert result["draws"] == []
    assert result["initial"] == result["final"]
    GeneratorState.from_dict(result["final"])


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        run_draws(DrawConfig(count=-1))


def test_cli_log_flag_writes_json(tmp_path, monkeypatch, capsys):
    log_path = tmp_path / "reports" / "out.json"
    monkeypatch.setattr(
        sys,
        "argv",
        ["run_draws.py", "--count", "3", "--seed1", "0x2a", "--log", str(log_path)],
    )

    run_draws_cli.main()
    captured = capsys.readouterr()

    assert log_path.exists()
    payload = json.loads(log_path.read_text())
    assert payload["draws"][0] == "0xa15c02b71a410f65"

    stdout_payload = json.loads(captured.out)
    assert stdout_payload == payload


def test_cli_log_flag_without_value_uses_default(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    default_log = run_draws_cli.DEFAULT_LOG_PATH
    monkeypatch.setattr(sys, "argv", ["run_draws.py", "--count", "1", "--log"])

    try:
        run_draws_cli.main()
        captured = capsys.readouterr()

        assert default_log.exists()
        payload = json.loads(default_log.read_text())
        assert json.loads(captured.out)["final"] == payload["final"]
    finally:
        if default_log.exists():
            default_log.unlink()


def test_cli_rejects_bad_integers(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["run_draws.py", "--seed1", "forty-two"])
    with pytest.raises(SystemExit):
        run_draws_cli.main()
    assert "Expected an integer" in capsys.readouterr().err


def test_cli_rejects_negative_count(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["run_draws.py", "--count", "-2"])
    with pytest.raises(SystemExit):
        run_draws_cli.main()


def test_script_executes_without_pythonpath_requirement():
    repo_root = Path(__file__).resolve().parents[1]
    script_path = repo_root / "scripts" / "run_draws.py"
    result = subprocess.run(
        [sys.executable, str(script_path), "--count", "2", "--advance", "-1"],
        cwd=repo_root,
        check=False,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
    assert len(json.loads(result.stdout)["draws"]) == 2
