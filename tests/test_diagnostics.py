# tests/test_diagnostics.py

import json
from datetime import date

import pytest

from seoian.diagnostics import gaps, superday_plot

from conftest import build_ranges, range_records


def test_gaps_reports_missing_month(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("SEOIAN_DATA_DIR", raising=False)
    rs = [r for r in build_ranges(1, 2) if not (r.seoian_year == 2 and r.month_no == 3)]
    path = tmp_path / "ranges.json"
    path.write_text(json.dumps(range_records(rs)), encoding="utf-8")

    assert gaps.main(["--ranges", str(path)]) == 1
    out = capsys.readouterr().out
    assert out.startswith("gap")
    assert "28 day(s)" in out
    assert "0002/02" in out and "0002/04" in out


def test_superday_series():
    np = pytest.importorskip("numpy")
    x, y = superday_plot.build_series(np, 2024, "America/Toronto", "UTC", rounded=False)
    assert len(x) == len(y) == 366
    assert x[0] == 1
    assert y[date(2024, 3, 10).timetuple().tm_yday - 1] == pytest.approx(28.0)
    assert y[date(2024, 1, 10).timetuple().tm_yday - 1] == pytest.approx(29.0)
