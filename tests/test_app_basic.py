import os

from PyQt6.QtGui import QKeySequence
from PyQt6.QtWidgets import QApplication

from conftest import make_png
from pugaipadam.app import build_viewer, launch_args, path_args
from pugaipadam.shortcuts.shortcuts_manager import COMMANDS, get_effective_keymap
from pugaipadam.storage.settings_store import ViewerSettings
from pugaipadam.ui.interaction import ViewerEvent
from pugaipadam.ui.title_status import NO_IMAGES_TITLE


def make_viewer(qtbot, args, **cfg):
    w = build_viewer(args, ViewerSettings(**cfg))
    qtbot.addWidget(w)
    return w


def three_images(tmp_path):
    for name in ("a.png", "b.png", "c.png"):
        make_png(tmp_path / name)
    return [str(tmp_path / n) for n in ("a.png", "b.png", "c.png")]


def test_window_constructs_with_empty_collection(qtbot):
    w = make_viewer(qtbot, [])
    assert w.windowTitle().startswith(NO_IMAGES_TITLE)
    assert not w.prev_button.isEnabled()
    assert not w.next_button.isEnabled()
    assert w.image_display_area.originalPixmap() is None


def test_all_decodes_failing_shows_placeholder(qtbot, tmp_path):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"nope")
    w = make_viewer(qtbot, [str(bad)])
    assert w.windowTitle().startswith(NO_IMAGES_TITLE)
    assert len(w.handler.store) == 0


def test_buttons_navigate_cyclically(qtbot, tmp_path):
    w = make_viewer(qtbot, three_images(tmp_path))
    assert w.windowTitle().startswith("a.png (1/3)")
    assert w.prev_button.isEnabled() and w.next_button.isEnabled()
    w.next_button.click()
    assert w.windowTitle().startswith("b.png (2/3)")
    w.prev_button.click()
    w.prev_button.click()
    assert w.windowTitle().startswith("c.png (3/3)")
    assert w.details_label.text().endswith("3x2 pixels")
    pix = w.image_display_area.originalPixmap()
    assert pix is not None and (pix.width(), pix.height()) == (3, 2)


def test_clamping_disables_buttons_at_edges(qtbot, tmp_path):
    w = make_viewer(qtbot, three_images(tmp_path), nav_wrap_ends=False)
    assert not w.prev_button.isEnabled()
    assert w.next_button.isEnabled()
    w.dispatch(ViewerEvent.LAST)
    assert w.prev_button.isEnabled()
    assert not w.next_button.isEnabled()


def test_arrow_shortcuts_are_bound(qtbot, tmp_path):
    w = make_viewer(qtbot, three_images(tmp_path))
    by_key = {sc.key().toString(): sc for sc in w._shortcuts}
    assert QKeySequence("Right").toString() in by_key
    by_key[QKeySequence("Right").toString()].activated.emit()
    assert w.handler.store.current_index == 1
    by_key[QKeySequence("Left").toString()].activated.emit()
    assert w.handler.store.current_index == 0


def test_fullscreen_toggle_hides_header(qtbot, tmp_path):
    w = make_viewer(qtbot, three_images(tmp_path))
    w.show()
    w.toggle_fullscreen()
    assert w.is_fullscreen
    assert w.button_bar.isHidden()
    w.handle_escape()
    assert not w.is_fullscreen
    assert not w.button_bar.isHidden()
    # 창 모드에서 Esc는 아무 것도 하지 않음
    w.handle_escape()
    assert not w.is_fullscreen


def test_effective_keymap_respects_locks():
    eff = get_effective_keymap({"show_next_image": ["N"], "handle_escape": ["Q"]})
    assert eff["show_next_image"] == ["N"]
    assert eff["handle_escape"] == ["Escape"]
    assert eff["show_prev_image"] == ["Left"]
    assert {c.id for c in COMMANDS} == set(eff)


def test_path_args_keeps_dash_prefixed_files(tmp_path):
    p = os.path.join(str(tmp_path), "x.png")
    assert path_args(["-cover.png", p, ""]) == ["-cover.png", p]


def test_dash_prefixed_file_is_opened(qtbot, tmp_path):
    p = make_png(tmp_path / "-cover.png")
    app = QApplication.instance()
    args = launch_args(app, ["prog", p], created=False)
    assert args == [p]
    w = make_viewer(qtbot, args)
    assert w.windowTitle().startswith("-cover.png (1/1)")
