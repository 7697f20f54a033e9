import json

from mog.smoke import run_smoke


def test_run_smoke_without_group_order(tmp_path, capsys) -> None:
    out_path = tmp_path / "nested" / "smoke.json"
    rc = run_smoke(out_path=out_path, samples=20, seed=11, check_order=False)
    assert rc == 0
    summary = json.loads(out_path.read_text(encoding="utf-8"))
    assert summary["ok"] is True
    assert summary["failures"] == []
    assert summary["group_order"] is None
    assert summary["weight_distribution"] == {"0": 1, "8": 759, "12": 2576, "16": 759, "24": 1}
    assert "smoke: samples=20 seed=11" in capsys.readouterr().out
