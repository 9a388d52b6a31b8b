import pytest

from swarmshow.config import (DEFAULT_CONFIG, MIN_SPEED, ConfigError, SwarmConfig, deep_update, load_config,
                              normalize_anchor, normalize_animating, normalize_scale, normalize_speed,
                              normalize_swarm_size)


def test_load_config_defaults_are_a_fresh_copy():
    cfg = load_config(None)
    assert cfg == DEFAULT_CONFIG
    cfg["swarm"]["formation"] = "heart"
    assert DEFAULT_CONFIG["swarm"]["formation"] == "indian_flag"


def test_yaml_overrides_merge_into_defaults(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("steps: 10\nswarm:\n  formation: sphere\n")
    cfg = load_config(path)
    assert cfg["steps"] == 10
    assert cfg["swarm"]["formation"] == "sphere"
    assert cfg["swarm"]["swarm_size"] == DEFAULT_CONFIG["swarm"]["swarm_size"]


def test_inherits_resolves_relative_to_file(tmp_path):
    (tmp_path / "base.yaml").write_text("steps: 99\nswarm:\n  scale: 3.0\n  formation: lotus\n")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "child.yaml").write_text("inherits: ../base.yaml\nswarm:\n  formation: crown\n")
    cfg = load_config(sub / "child.yaml")
    assert cfg["steps"] == 99
    assert cfg["swarm"]["scale"] == 3.0
    assert cfg["swarm"]["formation"] == "crown"
    assert "inherits" not in cfg


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == DEFAULT_CONFIG


def test_non_mapping_yaml_is_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_deep_update_does_not_mutate_base():
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    out = deep_update(base, {"a": {"b": 10}})
    assert out == {"a": {"b": 10, "c": 2}, "d": 3}
    assert base["a"]["b"] == 1


def test_swarm_config_from_dict(caplog):
    cfg = SwarmConfig.from_dict({"formation": "star", "anchor": [1, 2, 3], "zoom": 15})
    assert cfg.formation == "star"
    assert cfg.anchor == (1, 2, 3)
    assert cfg.swarm_size == 150
    assert "zoom" in caplog.text
    assert SwarmConfig.from_dict(None) == SwarmConfig()


def test_swarm_config_round_trips_through_dict():
    cfg = SwarmConfig(formation="dna", speed=2.0)
    assert SwarmConfig.from_dict(cfg.to_dict()) == cfg


def test_normalizers():
    assert normalize_swarm_size(0) == 1
    assert normalize_swarm_size(7.9) == 7
    assert normalize_swarm_size(None) is None
    assert normalize_scale(-1) == 0.0
    assert normalize_scale("2.5") == 2.5
    assert normalize_scale(float("inf")) is None
    assert normalize_speed(0) == MIN_SPEED
    assert normalize_speed(2) == 2.0
    assert normalize_anchor([1, 2, 3]) == (1.0, 2.0, 3.0)
    assert normalize_anchor([1, 2]) is None
    assert normalize_anchor(5) is None


def test_from_dict_passes_bad_anchor_through():
    assert SwarmConfig.from_dict({"anchor": None}).anchor is None
    assert SwarmConfig.from_dict({"anchor": "up"}).anchor == "up"


def test_normalize_animating():
    assert normalize_animating(True) is True
    assert normalize_animating("no") is False
    assert normalize_animating(" YES ") is True
    assert normalize_animating(0) is False
    assert normalize_animating("sometimes") is None
    assert normalize_animating(3) is None
    assert normalize_animating(None) is None
