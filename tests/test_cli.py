import os
import subprocess
import sys
from pathlib import Path

from mog.cli import main
from mog.m24 import generator

SRC = Path(__file__).resolve().parents[1] / "src"


def test_complete_prints_octad(capsys) -> None:
    assert main(["complete", "0,1,2,3,4"]) == 0
    out = capsys.readouterr().out
    assert "points=[0, 1, 2, 3, 4, 11, 17, 23]" in out
    assert "# #  # #  # ." in out


def test_decode_reports_correction(capsys) -> None:
    assert main(["decode", "0,1,2,3,4,11,17,23,5"]) == 0
    out = capsys.readouterr().out
    assert "distance:  1" in out
    assert "corrected: [5]" in out


def test_decode_distance_four_lists_nearest(capsys) -> None:
    assert main(["decode", "0,1,2,3"]) == 0
    out = capsys.readouterr().out
    assert "nearest codewords at distance 4:" in out


def test_sextet_and_generator(capsys) -> None:
    assert main(["sextet", "0,1,2,3"]) == 0
    assert main(["generator", "g2"]) == 0
    out = capsys.readouterr().out
    assert "0: [0, 1, 2, 3]" in out
    assert "g2: order=3" in out


def test_errors_exit_with_code_2(capsys) -> None:
    assert main(["complete", "0,1,2"]) == 2
    assert "AmbiguousInput" in capsys.readouterr().err
    assert main(["generator", "g9"]) == 2
    assert "UnknownGenerator" in capsys.readouterr().err
    assert main(["encode", "4096"]) == 2
    assert "InvalidPattern" in capsys.readouterr().err


def test_cli_help() -> None:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join([str(SRC), env.get("PYTHONPATH", "")])
    proc = subprocess.run(
        [sys.executable, "-m", "mog.cli", "--help"],
        capture_output=True,
        text=True,
        check=False,
        env=env,
    )
    output = (proc.stdout or "") + (proc.stderr or "")
    assert proc.returncode == 0
    assert "decode" in output
    assert "sextet" in output


def test_label_prints_induced_permutations(capsys) -> None:
    args = ["label", "0,6,12,18", "0=0", "1=0", "7=1", "2=1", "--stabilizer", "4,5,0,1,2,3"]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert f"to_standard:   {generator('g3')}" in out
    assert "stabilizer:" in out
    assert main(["label", "0,6,12,18", "0=0"]) == 2
    assert "AmbiguousInput" in capsys.readouterr().err
