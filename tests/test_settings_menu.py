from __future__ import annotations

import importlib.util

import pytest

HAS_ARCADE = importlib.util.find_spec("arcade") is not None

pytestmark = pytest.mark.skipif(not HAS_ARCADE, reason="requires arcade")


def test_pick_font_name_prefers_first_installed(monkeypatch):
    import pyglet

    import settings_menu

    monkeypatch.setattr(pyglet.font, "have_font", lambda name: name in {"Noto Sans", "Arial"})

    assert settings_menu.load_font(None) == "Noto Sans"


def test_pick_font_name_falls_back_to_generic_family(monkeypatch):
    import pyglet

    import settings_menu

    monkeypatch.setattr(pyglet.font, "have_font", lambda name: False)

    assert settings_menu.load_font(None) == "sans-serif"


def test_missing_font_file_is_asset_error(tmp_path):
    import settings_menu
    from errors import AssetLoadError

    with pytest.raises(AssetLoadError, match="cannot load font"):
        settings_menu.load_font(tmp_path / "missing.ttf")


def test_progress_bar_fraction_is_clamped():
    import settings_menu

    bar = settings_menu.UIProgressBar(min_value=0, max_value=10, value=7, track_color=(0, 0, 0, 255), fill_color=(1, 1, 1, 255))
    assert bar.fraction == pytest.approx(0.7)

    bar.value = 42
    assert bar.fraction == 1.0


@pytest.fixture(scope="module")
def window():
    import arcade

    try:
        win = arcade.Window(920, 920, "settings menu test", visible=False)
    except Exception as exc:  # no display or GL context on this machine
        pytest.skip(f"cannot open an arcade window: {exc}")
    yield win
    win.close()


@pytest.fixture
def overlay(window):
    import settings_menu
    from theme import build_theme
    from ui_state import Settings, UIState

    ui_state = UIState(Settings(show_fps=False, vsync=True))
    menu = settings_menu.SettingsOverlay(window, ui_state, build_theme())
    yield menu
    menu.manager.disable()


def _open(overlay):
    assert overlay.ui_state.handle_escape()
    overlay.open_main_menu()
    overlay.manager.execute_layout()


def test_checkboxes_start_from_current_settings(overlay):
    _open(overlay)

    assert overlay.checkboxes["Show FPS"].value is False
    assert overlay.checkboxes["VSynch"].value is True


def test_checkbox_change_toggles_settings(overlay):
    _open(overlay)

    overlay.checkboxes["Show FPS"].value = True
    overlay.checkboxes["VSynch"].value = False

    assert overlay.ui_state.settings.show_fps is True
    assert overlay.ui_state.settings.vsync is False

    overlay.checkboxes["Show FPS"].value = False
    assert overlay.ui_state.settings.show_fps is False


def test_close_button_closes_menu_and_removes_widgets(overlay):
    from arcade.gui import UIOnClickEvent

    from ui_state import MenuState

    _open(overlay)
    panel = overlay.panel
    button = overlay.close_button

    button.dispatch_event("on_click", UIOnClickEvent(source=button, x=0, y=0, button=1, modifiers=0))

    assert overlay.ui_state.state is MenuState.CLOSED
    assert overlay.panel is None
    assert overlay.checkboxes == {}
    assert panel not in overlay.manager.children[1]
    # escape opens a fresh menu again
    _open(overlay)
    assert overlay.panel is not None


def test_hovered_tracks_pointer_over_open_panel(overlay):
    _open(overlay)

    overlay.update((200, 450))
    assert overlay.hovered is True

    overlay.update((20, 450))
    assert overlay.hovered is False


def test_pointer_reaches_loop_while_modal_menu_is_open(window, overlay, monkeypatch):
    from frame_loop import FrameInput, PointerTracker

    # no running event loop, so dispatch straight to the handler stack
    monkeypatch.setattr(window, "_enable_event_queue", False)
    frame_input = FrameInput()
    tracker = PointerTracker(frame_input)
    window.push_handlers(tracker)
    try:
        _open(overlay)
        window.dispatch_event("on_mouse_motion", 20, 450, 0, 0)
        window.dispatch_event("on_mouse_motion", 200, 450, 180, 0)
    finally:
        window.remove_handlers(tracker)

    assert frame_input.pointer == (200, 450)
    overlay.update(frame_input.pointer)
    assert overlay.hovered is True
