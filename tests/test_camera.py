import pytest

from minilab.engine3d.camera import Camera


def test_defaults_center_of_screen():
    camera = Camera()
    assert camera.zoom == 300.0
    assert camera.offset_x == 400.0
    assert camera.offset_y == 300.0


def test_origin_projects_to_offsets():
    camera = Camera()
    for z in (0.0, 100.0, 550.0):
        assert camera.project_x(0.0, z) == camera.offset_x
        assert camera.project_y(0.0, z) == camera.offset_y


def test_depth_zero_has_unit_scale():
    camera = Camera()
    assert camera.scale(0.0) == 1.0
    assert camera.project_x(25.0, 0.0) == camera.offset_x + 25.0
    assert camera.project_y(-40.0, 0.0) == camera.offset_y - 40.0


def test_depth_equal_to_zoom_halves_size():
    camera = Camera(zoom=200.0)
    assert camera.scale(200.0) == pytest.approx(0.5)


def test_scale_shrinks_with_depth():
    camera = Camera()
    scales = [camera.scale(z) for z in (0.0, 50.0, 150.0, 400.0)]
    assert scales == sorted(scales, reverse=True)
    assert all(0.0 < s <= 1.0 for s in scales)


def test_offsets_shift_projection():
    base = Camera()
    moved = Camera(offset_x=base.offset_x + 10.0, offset_y=base.offset_y - 5.0)
    assert moved.project_x(30.0, 120.0) == pytest.approx(base.project_x(30.0, 120.0) + 10.0)
    assert moved.project_y(30.0, 120.0) == pytest.approx(base.project_y(30.0, 120.0) - 5.0)


def test_depth_at_negative_zoom_raises():
    camera = Camera()
    with pytest.raises(ZeroDivisionError):
        camera.scale(-camera.zoom)