import numpy as np
import pytest

from swarmshow.core.colors import COLOR_MODES, PALETTES, agent_color, hsl
from swarmshow.core.state import AgentState


def agent(pos=(0.0, 0.0, 0.0), vel=(0.0, 0.0, 0.0)):
    return AgentState(id=0, pos=np.array(pos, dtype=float), target=np.zeros(3), vel=np.array(vel, dtype=float))


def test_all_original_modes_exist():
    assert set(COLOR_MODES) == {
        "by_index", "by_distance", "by_velocity", "rainbow", "temperature",
        "indian_flag", "peacock", "fire", "ocean", "galaxy",
    }


def test_hsl_matches_css():
    assert hsl(0, 1.0, 0.5) == pytest.approx((1.0, 0.0, 0.0))
    assert hsl(120, 1.0, 0.5) == pytest.approx((0.0, 1.0, 0.0))
    assert hsl(600, 1.0, 0.5) == pytest.approx(hsl(240, 1.0, 0.5))


@pytest.mark.parametrize("mode", COLOR_MODES)
def test_colors_are_rgb_and_pure(mode):
    a = agent(pos=(3.0, 4.0, 0.0), vel=(0.01, 0.0, 0.0))
    before = a.copy()
    color = agent_color(a, 5, 20, mode, t=2.5)
    assert len(color) == 3
    assert all(0.0 <= c <= 1.0 for c in color)
    np.testing.assert_array_equal(a.pos, before.pos)
    np.testing.assert_array_equal(a.vel, before.vel)


def test_by_index_sweeps_hue():
    assert agent_color(agent(), 0, 10, "by_index") == pytest.approx(hsl(0, 0.7, 0.6))
    assert agent_color(agent(), 5, 10, "by_index") == pytest.approx(hsl(180, 0.7, 0.6))


def test_by_distance_runs_blue_to_red():
    near = agent_color(agent(), 0, 1, "by_distance")
    far = agent_color(agent(pos=(50.0, 0.0, 0.0)), 0, 1, "by_distance")
    assert near == pytest.approx(hsl(240, 0.8, 0.6))
    assert far == pytest.approx(hsl(0, 0.8, 0.6))


def test_by_velocity_uses_realized_step():
    still = agent_color(agent(), 0, 1, "by_velocity")
    fast = agent_color(agent(vel=(0.1, 0.0, 0.0)), 0, 1, "by_velocity")
    assert still[2] > still[0]
    assert fast[0] > fast[2]


def test_time_driven_modes_change_over_time():
    for mode in ("rainbow", "temperature"):
        assert agent_color(agent(), 3, 10, mode, t=0.0) != agent_color(agent(), 3, 10, mode, t=1.0)


def test_tricolor_bands_by_index_fraction():
    saffron, white, green = PALETTES["indian_flag"]
    colors = [agent_color(agent(), i, 9, "indian_flag") for i in range(9)]
    assert colors[:3] == [saffron] * 3
    assert colors[3:6] == [white] * 3
    assert colors[6:] == [green] * 3


def test_palette_modes_repeat():
    palette = PALETTES["fire"]
    colors = [agent_color(agent(), i, 50, "fire") for i in range(2 * len(palette))]
    assert colors[: len(palette)] == colors[len(palette):]
    assert colors[0] == palette[0]


def test_empty_swarm_size_is_safe():
    color = agent_color(agent(), 0, 0, "by_index")
    assert all(np.isfinite(color))


def test_unknown_mode_falls_back_to_index():
    assert agent_color(agent(), 2, 4, "plaid") == agent_color(agent(), 2, 4, "by_index")
