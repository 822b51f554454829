from pathlib import Path

import pytest
from apps.cli.run import main, run


def test_cli_writes_reports(tmp_path: Path):
    d = tmp_path / "words.txt"
    d.write_text("cat\ncar\nbat\ntiger\na\n", encoding="utf-8")
    out = tmp_path / "reports"

    summaries = run(["--dict", str(d), "--seed", "3", "--outdir", str(out),
                      "--progress", "off", "--manifest", "--derive-order"])
    assert [s["strategy_id"] for s in summaries] == ["random", "frequency", "adaptive"]
    for sid in ("random", "frequency", "adaptive"):
        lines = (out / f"{sid}.txt").read_text(encoding="utf-8").splitlines()
        assert len(lines) == 5
    assert len(list(out.glob("run_*_manifest.json"))) == 1


def test_cli_rejects_bad_dictionary(tmp_path: Path):
    d = tmp_path / "words.txt"
    d.write_text("cat\nCar\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["--dict", str(d), "--outdir", str(tmp_path), "--progress", "off"])


def test_cli_unknown_strategy(tmp_path: Path):
    with pytest.raises(SystemExit):
        main(["--dict", "-", "--strategies", "oracle"])
