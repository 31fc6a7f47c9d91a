import math

import numpy as np
import pytest

from codedrills.solar import CelestialBody, SolarSystem


def test_initial_camera_state():
    system = SolarSystem()
    assert np.allclose(system.camera_pos, [0.0, 5.0, 15.0])
    assert system.camera_distance == 15.0
    assert len(system.planets) == 2


def test_body_update_stays_on_orbit():
    body = CelestialBody((1.0, 1.0, 1.0), 1.0, 4.0, 2.0, 5.0)
    body.update(0.3)
    assert np.linalg.norm(body.position) == pytest.approx(4.0)
    assert body.position[1] == 0.0
    assert body.orbit_angle == pytest.approx(2.0 * 0.3)
    assert body.rotation_angle == pytest.approx(5.0 * 0.3)


def test_orbit_around_keeps_distance_and_height():
    body = CelestialBody((1.0, 1.0, 1.0), 0.3, 2.0, 8.0, 10.0)
    center = np.array([3.0, 1.5, -2.0])
    body.orbit_around(center, 0.4)
    offset = body.position - center
    assert offset[1] == 0.0
    assert np.linalg.norm(offset) == pytest.approx(2.0)


def test_step_tracks_frame_time():
    system = SolarSystem()
    system.step(1.0)
    assert system.delta_time == pytest.approx(1.0)
    system.step(1.5)
    assert system.delta_time == pytest.approx(0.5)
    assert system.current_time == 1.5


def test_update_moves_moon_with_second_planet():
    system = SolarSystem()
    system.update(0.25)
    earth = system.planets[1]
    assert np.linalg.norm(system.moon.position - earth.position) == pytest.approx(
        system.moon.orbit_radius
    )


def test_update_places_camera_from_angles():
    system = SolarSystem()
    system.update(0.0)
    assert np.allclose(system.camera_pos, [system.camera_distance, 0.0, 0.0])


def test_mouse_move_without_press_changes_nothing():
    system = SolarSystem()
    system.on_mouse_move(10.0, 10.0)
    system.on_mouse_move(200.0, 300.0)
    assert system.camera_angle_x == 0.0
    assert system.camera_angle_y == 0.0


def test_drag_turns_camera():
    system = SolarSystem()
    system.on_mouse_button(True, 0.0, 0.0)
    system.on_mouse_move(100.0, 0.0)
    assert system.camera_angle_y == pytest.approx(100.0 * 0.01)
    assert system.camera_angle_x == 0.0


def test_pitch_is_clamped():
    system = SolarSystem()
    system.on_mouse_button(True, 0.0, 0.0)
    system.on_mouse_move(0.0, -1000.0)
    assert system.camera_angle_x == pytest.approx(1.5)
    system.on_mouse_move(0.0, 5000.0)
    assert system.camera_angle_x == pytest.approx(-1.5)


def test_release_stops_drag():
    system = SolarSystem()
    system.on_mouse_button(True, 0.0, 0.0)
    system.on_mouse_button(False, 0.0, 0.0)
    system.on_mouse_move(50.0, 50.0)
    assert system.mouse_pressed is False
    assert system.camera_angle_y == 0.0


def test_scroll_clamps_distance():
    system = SolarSystem()
    system.on_scroll(2.0)
    assert system.camera_distance == pytest.approx(15.0 - 2.0 * 0.5)
    system.on_scroll(1000.0)
    assert system.camera_distance == 3.0
    system.on_scroll(-1000.0)
    assert system.camera_distance == 50.0


def test_view_matrix_maps_camera_to_origin():
    system = SolarSystem()
    system.update(0.1)
    view = system.view_matrix()
    mapped = view @ np.array([*system.camera_pos, 1.0])
    assert np.allclose(mapped[:3], 0.0)


def test_projection_matrix_uses_window_aspect():
    proj = SolarSystem().projection_matrix()
    assert proj[1, 1] / proj[0, 0] == pytest.approx(1200 / 800)
    assert proj[1, 1] == pytest.approx(1.0 / math.tan(math.radians(45.0) / 2))


def test_model_matrices_order_and_contents():
    system = SolarSystem()
    system.update(0.5)
    items = system.model_matrices()
    assert [item.kind for item in items] == ["sun", "planet", "planet", "moon"]
    assert np.allclose(np.diag(items[0].model), [1.5, 1.5, 1.5, 1.0])
    for item, body in zip(items[1:], [*system.planets, system.moon]):
        assert np.allclose(item.model[:3, 3], body.position)
        assert item.color == body.color
        assert np.allclose(item.normal, np.linalg.inv(item.model).T)


def test_planet_model_scale_matches_radius():
    system = SolarSystem()
    system.update(0.2)
    planet_item = system.model_matrices()[2]
    column_lengths = np.linalg.norm(planet_item.model[:3, :3], axis=0)
    assert np.allclose(column_lengths, system.planets[1].radius)