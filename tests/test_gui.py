import random

import pytest

from randomsurfer.gui import SurferController


def test_ranking_before_surf():
    with pytest.raises(RuntimeError, match="No Web Surfing made"):
        SurferController(random.Random(0)).ranking()


@pytest.mark.parametrize("fields", [("", "3", "0.85"), ("10", "", "0.85"), ("10", "3", "")])
def test_blank_fields(fields):
    with pytest.raises(ValueError, match="Fill all the blanks"):
        SurferController(random.Random(0)).surf(*fields)


def test_blank_fields_keep_no_surfer():
    controller = SurferController(random.Random(0))
    with pytest.raises(ValueError):
        controller.surf("", "", "")
    assert controller.surfer is None


def test_surf_returns_log():
    controller = SurferController(random.Random(1))
    log = controller.surf("10", "3", "0.85")
    assert log.count("topothetithike") == 3
    assert controller.surfer.rows == 10


def test_ranking_after_surf():
    controller = SurferController(random.Random(2))
    controller.surf("5", "2", "0.85")
    lines = controller.ranking().splitlines()
    assert len(lines) == 5
    assert lines[0].startswith("Sthn thesh  1 vrisketai h selida")


def test_invalid_number():
    with pytest.raises(ValueError):
        SurferController(random.Random(0)).surf("ten", "3", "0.85")


def test_same_seed_same_surf():
    first = SurferController(random.Random(8)).surf("6", "2", "0.5")
    second = SurferController(random.Random(8)).surf("6", "2", "0.5")
    assert first == second