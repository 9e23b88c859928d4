from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol

from ..services.collection_store import CollectionStore
from ..services.image_service import ImageRepresentation
from ..utils.logging_setup import get_logger
from .state import ViewState

log = get_logger("ui.interaction")


class ViewerEvent(Enum):
    NEXT = "next"
    PREVIOUS = "previous"
    TOGGLE_FULLSCREEN = "toggle_fullscreen"
    ESCAPE = "escape"
    KEY_LEFT = "key_left"
    KEY_RIGHT = "key_right"
    FIRST = "first"
    LAST = "last"


class WindowMode(Enum):
    WINDOWED = "windowed"
    FULLSCREEN = "fullscreen"


class WindowCollaborator(Protocol):
    def set_title(self, title: str) -> None: ...

    def request_window_mode(self, mode: WindowMode) -> None: ...

    def set_header_visible(self, visible: bool) -> None: ...

    def show_current(self, image: Optional[ImageRepresentation], state: ViewState) -> None: ...


class InteractionHandler:
    """외부 이벤트(버튼, 키)를 컬렉션/전체화면 상태 전이로 바꾼다.

    상태는 {창 모드, 전체화면} x 탐색 위치이며 두 축은 독립적이다.
    창 쪽 부수효과는 collaborator에게 요청으로만 전달된다.
    """

    def __init__(self, store: CollectionStore, window: Optional[WindowCollaborator] = None):
        self._store = store
        self._window = window
        self._fullscreen = False

    @property
    def store(self) -> CollectionStore:
        return self._store

    @property
    def fullscreen(self) -> bool:
        return self._fullscreen

    def attach(self, window: WindowCollaborator) -> None:
        self._window = window

    def view_state(self) -> ViewState:
        return ViewState.derive(self._store, self._fullscreen)

    def refresh(self) -> None:
        """현재 위치 기준으로 제목/이미지를 다시 내보낸다."""
        if self._window is None:
            return
        state = self.view_state()
        self._window.set_title(state.title)
        self._window.show_current(self._store.current(), state)

    def handle(self, event: ViewerEvent) -> bool:
        """이벤트 처리. 상태가 바뀌었으면 True."""
        if event in (ViewerEvent.NEXT, ViewerEvent.KEY_RIGHT):
            changed = self._store.advance()
        elif event in (ViewerEvent.PREVIOUS, ViewerEvent.KEY_LEFT):
            changed = self._store.retreat()
        elif event is ViewerEvent.FIRST:
            changed = self._store.first()
        elif event is ViewerEvent.LAST:
            changed = self._store.last()
        elif event is ViewerEvent.TOGGLE_FULLSCREEN:
            self._toggle_fullscreen()
            changed = True
        elif event is ViewerEvent.ESCAPE:
            # 전체화면일 때만 토글과 동일, 창 모드에서는 아무 것도 하지 않음
            if self._fullscreen:
                self._toggle_fullscreen()
                changed = True
            else:
                changed = False
        else:
            raise ValueError(f"unknown event: {event!r}")
        log.debug(
            "event | kind=%s | changed=%s | index=%s | fullscreen=%s",
            event.value, changed, self._store.current_index, self._fullscreen,
        )
        if changed and event not in (ViewerEvent.TOGGLE_FULLSCREEN, ViewerEvent.ESCAPE):
            self.refresh()
        return changed

    def next(self) -> bool:
        return self.handle(ViewerEvent.NEXT)

    def previous(self) -> bool:
        return self.handle(ViewerEvent.PREVIOUS)

    def toggle_fullscreen(self) -> bool:
        return self.handle(ViewerEvent.TOGGLE_FULLSCREEN)

    def escape(self) -> bool:
        return self.handle(ViewerEvent.ESCAPE)

    def _toggle_fullscreen(self) -> None:
        self._fullscreen = not self._fullscreen
        mode = WindowMode.FULLSCREEN if self._fullscreen else WindowMode.WINDOWED
        log.info("window_mode | mode=%s", mode.value)
        if self._window is None:
            return
        self._window.request_window_mode(mode)
        self._window.set_header_visible(not self._fullscreen)
