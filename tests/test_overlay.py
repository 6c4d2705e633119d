"""Tests for the overlay capability variants (no display required)."""

from unittest.mock import MagicMock

from core.overlay import TkOverlay, UnsupportedOverlay, create_overlay, drag_position


class TestDragPosition:
    """x is measured from the right screen edge, y from the top."""

    def test_drag_left_and_down(self):
        assert drag_position((20, 100), (500, 300), (450, 340)) == (70, 140)

    def test_drag_right_and_up(self):
        assert drag_position((20, 100), (500, 300), (510, 290)) == (10, 90)

    def test_no_movement(self):
        assert drag_position((20, 100), (500, 300), (500, 300)) == (20, 100)


class TestCreateOverlay:
    def test_without_root_is_unsupported(self):
        overlay = create_overlay(None, {"enabled": True})

        assert isinstance(overlay, UnsupportedOverlay)
        assert overlay.is_supported is False

    def test_disabled_in_config(self):
        overlay = create_overlay(MagicMock(), {"enabled": False})

        assert isinstance(overlay, UnsupportedOverlay)

    def test_tk_overlay_uses_configured_position(self):
        callback = MagicMock()
        overlay = create_overlay(MagicMock(), {"enabled": True, "x": 40, "y": 250}, on_capture_requested=callback)

        assert isinstance(overlay, TkOverlay)
        assert overlay.is_supported
        assert (overlay.x, overlay.y) == (40, 250)
        assert overlay.has_permission() is True

    def test_defaults_when_config_missing(self):
        overlay = create_overlay(MagicMock())

        assert (overlay.x, overlay.y) == (20, 100)


class TestTkOverlayCallbacks:
    def test_capture_button_calls_back(self):
        callback = MagicMock()
        overlay = TkOverlay(MagicMock(), on_capture_requested=callback)

        overlay._request_capture()

        callback.assert_called_once_with()

    def test_stop_before_start_is_noop(self):
        overlay = TkOverlay(MagicMock())

        overlay.stop()

        assert overlay.window is None


class TestUnsupportedOverlay:
    def test_actions_are_noops(self):
        overlay = UnsupportedOverlay()

        assert overlay.has_permission() is False
        assert overlay.start() is False
        overlay.request_permission()
        overlay.stop()
