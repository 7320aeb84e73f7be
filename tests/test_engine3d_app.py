import pytest

from minilab.engine3d.app import MOVE_SPEED, ZOOM_SPEED, apply_controls, main
from minilab.engine3d.camera import Camera


def test_no_keys_leaves_camera_unchanged():
    camera = Camera()
    apply_controls(camera, set(), 1.0)
    assert camera == Camera()


def test_w_moves_up_and_s_moves_down():
    camera = Camera()
    apply_controls(camera, {"w"}, 0.5)
    assert camera.offset_y == pytest.approx(Camera().offset_y - MOVE_SPEED * 0.5)
    apply_controls(camera, {"s"}, 0.5)
    assert camera.offset_y == pytest.approx(Camera().offset_y)


def test_a_and_d_move_horizontally():
    camera = Camera()
    apply_controls(camera, {"d"}, 0.25)
    assert camera.offset_x > Camera().offset_x
    apply_controls(camera, {"a"}, 0.5)
    assert camera.offset_x < Camera().offset_x


def test_q_zooms_in_and_e_zooms_out():
    camera = Camera()
    apply_controls(camera, {"q"}, 1.0)
    assert camera.zoom == pytest.approx(Camera().zoom + ZOOM_SPEED)
    apply_controls(camera, {"e"}, 1.0)
    assert camera.zoom == pytest.approx(Camera().zoom)


def test_opposite_keys_cancel():
    camera = Camera()
    apply_controls(camera, {"w", "s", "a", "d", "q", "e"}, 0.3)
    assert camera.offset_x == pytest.approx(Camera().offset_x)
    assert camera.offset_y == pytest.approx(Camera().offset_y)
    assert camera.zoom == pytest.approx(Camera().zoom)


def test_main_help_exits():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0