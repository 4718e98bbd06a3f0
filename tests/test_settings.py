import pytest

from grafengine.settings import Settings


def test_defaults():
    s = Settings()
    assert (s.screen_width, s.screen_height) == (1920, 1080)
    assert (s.top_camera_width, s.top_camera_height) == (500, 400)


def test_main_aspect():
    assert Settings(screen_width=800, screen_height=400).main_aspect() == pytest.approx(2.0)


def test_top_camera_aspect_uses_inset_size():
    s = Settings(top_camera_width=300, top_camera_height=300)
    assert s.top_camera_aspect() == pytest.approx(1.0)


def test_viewport_sits_in_top_right_corner():
    s = Settings()
    x, y, w, h = s.top_camera_viewport()
    assert (w, h) == (s.top_camera_width, s.top_camera_height)
    assert x + w == s.screen_width
    assert y + h == s.screen_height


def test_negative_dimension_rejected():
    with pytest.raises(ValueError):
        Settings(screen_width=-1)


def test_settings_are_mutable():
    s = Settings()
    s.screen_width = 1280
    x, _, w, _ = s.top_camera_viewport()
    assert x + w == 1280