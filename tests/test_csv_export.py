import io
import math
import random

import pytest

from randomsurfer.csv_export import damping_factors, export_grid, main


def test_damping_factors_range():
    values = list(damping_factors(0.50, 0.99, 0.01))
    assert values[0] == 0.50
    assert all(v <= 0.99 for v in values)
    assert all(b > a for a, b in zip(values, values[1:]))
    assert all(math.isclose(b - a, 0.01, abs_tol=1e-9) for a, b in zip(values, values[1:]))


def test_damping_factors_empty_when_first_above_last():
    assert list(damping_factors(0.9, 0.5, 0.1)) == []


def test_damping_factors_bad_step():
    with pytest.raises(ValueError):
        list(damping_factors(0.5, 0.9, 0))


def _grid(seed=1):
    out = io.StringIO()
    export_grid(out, 2, 2, 4, 1, 0.5, 0.7, 0.1, random.Random(seed))
    return out.getvalue()


def test_export_grid_layout():
    lines = _grid().splitlines()
    factors = list(damping_factors(0.5, 0.7, 0.1))
    assert lines[0].startswith(";DMP_0.5")
    assert lines[0].count(";DMP_") == len(factors)
    assert [line.split(";")[0] for line in lines[1:]] == ["2", "3", "4"]


def test_export_grid_values_use_comma():
    for line in _grid().splitlines()[1:]:
        cells = line.split(";")[1:]
        assert cells
        for cell in cells:
            assert "." not in cell and "," in cell
            assert 0.0 < float(cell.replace(",", ".")) <= 1.0


def test_export_grid_reproducible():
    first = _grid(3)
    second = _grid(3)
    assert len(first.splitlines()) == 4
    assert first.startswith(";DMP_0.5")
    assert first == second


def test_export_grid_bad_page_step():
    with pytest.raises(ValueError):
        export_grid(io.StringIO(), 2, 2, 4, 0, 0.5, 0.7, 0.1, random.Random(0))


def test_main_writes_file(tmp_path):
    code = main([
        "2", "result", "--directory", str(tmp_path), "--first-page", "2",
        "--last-page", "3", "--page-step", "1", "--first-damping-factor", "0.5",
        "--last-damping-factor", "0.6", "--seed", "4",
    ])
    assert code == 0
    lines = (tmp_path / "result.csv").read_text(encoding="utf-8").splitlines()
    assert [line.split(";")[0] for line in lines[1:]] == ["2", "3"]


def test_main_prompts(tmp_path, monkeypatch):
    answers = iter(["2", "asked"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    code = main([
        "--directory", str(tmp_path), "--first-page", "2", "--last-page", "2",
        "--first-damping-factor", "0.5", "--last-damping-factor", "0.5", "--seed", "1",
    ])
    assert code == 0
    assert (tmp_path / "asked.csv").read_text(encoding="utf-8").startswith(";DMP_0.5\n2;")