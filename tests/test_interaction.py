import pytest

from pugaipadam.services.collection_store import CollectionStore
from pugaipadam.services.image_service import ImageRepresentation
from pugaipadam.ui.interaction import InteractionHandler, ViewerEvent, WindowMode
from pugaipadam.ui.title_status import NO_IMAGES_TITLE


class RecordingWindow:
    def __init__(self):
        self.titles = []
        self.modes = []
        self.header = []
        self.shown = []

    def set_title(self, title):
        self.titles.append(title)

    def request_window_mode(self, mode):
        self.modes.append(mode)

    def set_header_visible(self, visible):
        self.header.append(visible)

    def show_current(self, image, state):
        self.shown.append(image.display_name if image else None)


def make_handler(n=3, wrap=True):
    items = [ImageRepresentation.from_pixels(f"/p/{i}.png", 1, 1, b"\x00" * 4) for i in range(n)]
    win = RecordingWindow()
    handler = InteractionHandler(CollectionStore(items, wrap=wrap), win)
    return handler, win


def test_refresh_pushes_title_and_image():
    handler, win = make_handler()
    handler.refresh()
    assert win.titles == ["0.png (1/3)"]
    assert win.shown == ["0.png"]


def test_next_and_previous_update_title():
    handler, win = make_handler()
    assert handler.handle(ViewerEvent.NEXT)
    assert win.titles[-1] == "1.png (2/3)"
    assert handler.handle(ViewerEvent.PREVIOUS)
    assert handler.handle(ViewerEvent.PREVIOUS)
    assert win.titles[-1] == "2.png (3/3)"


def test_keys_are_aliases_for_navigation():
    h1, w1 = make_handler()
    h2, w2 = make_handler()
    for a, b in ((ViewerEvent.KEY_RIGHT, ViewerEvent.NEXT), (ViewerEvent.KEY_LEFT, ViewerEvent.PREVIOUS)):
        h1.handle(a)
        h2.handle(b)
        assert h1.store.current_index == h2.store.current_index
    assert w1.titles == w2.titles


def test_toggle_twice_issues_paired_requests():
    handler, win = make_handler()
    assert not handler.fullscreen
    handler.handle(ViewerEvent.TOGGLE_FULLSCREEN)
    assert handler.fullscreen
    handler.handle(ViewerEvent.TOGGLE_FULLSCREEN)
    assert not handler.fullscreen
    assert win.modes == [WindowMode.FULLSCREEN, WindowMode.WINDOWED]
    assert win.header == [False, True]


def test_escape_in_fullscreen_exits():
    handler, win = make_handler()
    handler.toggle_fullscreen()
    assert handler.escape()
    assert not handler.fullscreen
    assert win.modes == [WindowMode.FULLSCREEN, WindowMode.WINDOWED]


def test_escape_while_windowed_is_noop():
    handler, win = make_handler()
    before = handler.view_state()
    assert not handler.handle(ViewerEvent.ESCAPE)
    assert handler.view_state() == before
    assert win.modes == []
    assert win.header == []
    assert win.titles == []


def test_fullscreen_is_orthogonal_to_navigation():
    handler, win = make_handler()
    handler.next()
    handler.toggle_fullscreen()
    assert handler.store.current_index == 1
    handler.next()
    assert handler.fullscreen
    assert win.titles[-1] == "2.png (3/3)"


def test_first_and_last():
    handler, win = make_handler(4)
    assert handler.handle(ViewerEvent.LAST)
    assert handler.store.current_index == 3
    assert not handler.handle(ViewerEvent.LAST)
    assert handler.handle(ViewerEvent.FIRST)
    assert win.titles[-1] == "0.png (1/4)"


def test_navigation_on_empty_collection_is_noop():
    handler, win = make_handler(0)
    handler.refresh()
    assert win.titles == [NO_IMAGES_TITLE]
    assert not handler.next()
    assert not handler.previous()
    assert not handler.handle(ViewerEvent.FIRST)
    assert win.titles == [NO_IMAGES_TITLE]


def test_clamping_handler_does_not_move_past_end():
    handler, win = make_handler(2, wrap=False)
    assert handler.next()
    assert not handler.next()
    assert handler.store.current_index == 1


def test_handler_without_window_tracks_state():
    store = CollectionStore()
    handler = InteractionHandler(store)
    handler.toggle_fullscreen()
    assert handler.fullscreen
    handler.refresh()


def test_unknown_event_is_rejected():
    handler, _ = make_handler()
    with pytest.raises(ValueError):
        handler.handle("next")
