# tests/test_config.py

import json

import pytest

from fast_view_cut.config import Config


def test_defaults():
    cfg = Config()
    assert cfg.min_pick_distance_mm == 1.0
    assert cfg.min_segment_length_mm == 1.0
    assert cfg.transform_sheet_pick is True
    assert cfg.activate_crop_box is True
    assert cfg.crop_box_visible is False
    assert cfg.min_pick_distance_ft == pytest.approx(1.0 / 304.8)
    assert cfg.planarity_tolerance_ft == pytest.approx(0.16 / 304.8)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_pick_distance_mm": -1.0},
        {"min_segment_length_mm": 0.0},
        {"planarity_tolerance_mm": -0.1},
        {"angle_tolerance_rad": -0.01},
        {"angle_tolerance_rad": 1.0},
        {"transaction_name": "   "},
    ],
)
def test_invalid_values_raise(kwargs):
    with pytest.raises(ValueError):
        Config(**kwargs)


def test_dict_round_trip_is_json_safe():
    cfg = Config(min_pick_distance_mm=2.5, crop_box_visible=True, transaction_name="Crop")
    payload = json.loads(json.dumps(cfg.to_dict()))
    again = Config.from_dict(payload)
    assert again.to_dict() == cfg.to_dict()


def test_from_dict_fills_defaults():
    cfg = Config.from_dict({"transform_sheet_pick": False})
    assert cfg.transform_sheet_pick is False
    assert cfg.min_segment_length_mm == 1.0


def test_repr_mentions_tolerances():
    assert "min_pick_distance_mm=1.0" in repr(Config())
