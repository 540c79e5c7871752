import pytest

from orrery.camera import Camera
from orrery.vector import Vector2D


def test_default_pixels_per_unit():
    assert Camera().pixels_per_unit() == 250.0


def test_move_and_move_back():
    camera = Camera(center=Vector2D(1.0, 2.0))
    offset = Vector2D(0.5, -3.0)
    camera.move(offset)
    assert camera.center == Vector2D(1.0, 2.0) + offset
    camera.move(-offset)
    assert camera.center.as_tuple() == pytest.approx((1.0, 2.0))


def test_view_size_times_scale_is_window_size():
    camera = Camera(zoom=2.0)
    w, h = camera.view_size(1920, 1080)
    ppu = camera.pixels_per_unit()
    assert (w * ppu, h * ppu) == pytest.approx((1920, 1080))


def test_zooming_in_shrinks_view():
    near = Camera(zoom=1.05)
    far = Camera(zoom=0.95)
    assert near.view_size(800, 600)[0] < far.view_size(800, 600)[0]


def test_window_center_maps_to_camera_center():
    camera = Camera(center=Vector2D(3.0, -4.0), zoom=1.5)
    world = camera.screen_to_world(960, 540, 1920, 1080)
    assert world.as_tuple() == pytest.approx(camera.center.as_tuple())


def test_top_left_pixel_maps_to_view_corner():
    camera = Camera(center=Vector2D(1.0, 1.0))
    w, h = camera.view_size(800, 600)
    world = camera.screen_to_world(0, 0, 800, 600)
    assert world.as_tuple() == pytest.approx((1.0 - w / 2, 1.0 - h / 2))


def test_screen_right_moves_world_right():
    camera = Camera()
    left = camera.screen_to_world(100, 300, 800, 600)
    right = camera.screen_to_world(700, 300, 800, 600)
    assert right.x > left.x
    assert right.y == pytest.approx(left.y)