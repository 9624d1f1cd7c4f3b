import pytest

from flying_toilet.config import GameConfig


def test_defaults():
    cfg = GameConfig()
    assert (cfg.world_width, cfg.world_height, cfg.ground_height) == (600, 600, 50)
    assert cfg.gravity == 0.3
    assert cfg.flap_impulse == -6.5
    assert cfg.max_velocity == 7.0
    assert cfg.pipes_per_level == 8
    assert cfg.floor_y == 550


@pytest.mark.parametrize("changes", [
    {"world_width": 0},
    {"ground_height": 600},
    {"min_gap": 250},
    {"max_speed": 0.5},
    {"min_spawn_interval": 0},
    {"min_spawn_interval": 200},
    {"pipes_per_level": 0},
    {"gap_decrement": -1},
    {"base_gap": 450},
])
def test_invalid_config_is_rejected(changes):
    with pytest.raises(ValueError):
        GameConfig(**changes)


def test_replace_returns_a_new_config():
    base = GameConfig()
    harder = base.replace(base_gap=180)
    assert harder.base_gap == 180
    assert base.base_gap == 200


def test_from_env_reads_prefixed_overrides(monkeypatch):
    monkeypatch.setenv("FLYING_TOILET_BASE_GAP", "180")
    monkeypatch.setenv("FLYING_TOILET_PIPES_PER_LEVEL", "5")
    cfg = GameConfig.from_env()
    assert cfg.base_gap == 180.0
    assert cfg.pipes_per_level == 5
    assert isinstance(cfg.pipes_per_level, int)


def test_from_env_rejects_garbage(monkeypatch):
    monkeypatch.setenv("FLYING_TOILET_GRAVITY", "heavy")
    with pytest.raises(ValueError, match="FLYING_TOILET_GRAVITY"):
        GameConfig.from_env()
