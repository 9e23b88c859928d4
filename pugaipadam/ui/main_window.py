from typing import Mapping, List, Optional

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QMainWindow  # type: ignore[import]
from PyQt6.QtGui import QPixmap  # type: ignore[import]

from ..services.image_service import ImageRepresentation, to_qimage
from ..shortcuts.shortcuts_manager import apply_shortcuts
from ..utils.logging_setup import get_logger
from .fullscreen_controller import enter_fullscreen as fs_enter_fullscreen, exit_fullscreen as fs_exit_fullscreen
from .image_view import ImageView
from .interaction import InteractionHandler, ViewerEvent, WindowMode
from .layout_builder import build_header_bar
from .state import ViewState
from .title_status import APP_NAME, NO_IMAGES_TITLE, update_details, update_window_title


class PugaipadamViewer(QMainWindow):
    """Qt 창. InteractionHandler의 창 쪽 협력자 역할만 한다."""

    def __init__(self, handler: InteractionHandler, custom_keys: Optional[Mapping[str, List[str]]] = None):
        super().__init__()
        self.log = get_logger("ui.PugaipadamViewer")
        self.setWindowTitle(APP_NAME)
        self.resize(1280, 800)
        self.previous_window_state = None  # 전체화면 이전 상태 저장
        self._shortcuts = []

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        central_widget.setStyleSheet("background-color: #2b2b2b;")

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(5, 5, 5, 5)
        self._normal_margins = (5, 5, 5, 5)

        self.image_display_area = ImageView(central_widget)
        self.image_display_area.set_placeholder_text(NO_IMAGES_TITLE)
        self.main_layout.addWidget(self.image_display_area, 1)

        build_header_bar(self)
        apply_shortcuts(self, custom_keys)

        self._handler = handler
        handler.attach(self)

    @property
    def handler(self) -> InteractionHandler:
        return self._handler

    @property
    def is_fullscreen(self) -> bool:
        return self._handler.fullscreen

    # ----- 이벤트 입구 -----
    def dispatch(self, event: ViewerEvent) -> bool:
        return self._handler.handle(event)

    def show_prev_image(self):
        self.dispatch(ViewerEvent.PREVIOUS)

    def show_next_image(self):
        self.dispatch(ViewerEvent.NEXT)

    def toggle_fullscreen(self):
        """전체화면 모드 토글"""
        self.dispatch(ViewerEvent.TOGGLE_FULLSCREEN)

    def handle_escape(self):
        self.dispatch(ViewerEvent.ESCAPE)

    # ----- WindowCollaborator -----
    def set_title(self, title: str) -> None:
        update_window_title(self, title)

    def request_window_mode(self, mode: WindowMode) -> None:
        if mode is WindowMode.FULLSCREEN:
            fs_enter_fullscreen(self)
        else:
            fs_exit_fullscreen(self)

    def _restore_previous_geometry(self):
        prev = self.previous_window_state
        if prev and not self.isFullScreen():
            self.setGeometry(prev['geometry'])

    def set_header_visible(self, visible: bool) -> None:
        self.button_bar.setVisible(bool(visible))

    def show_current(self, image: Optional[ImageRepresentation], state: ViewState) -> None:
        if image is None:
            self.image_display_area.setPixmap(None)
        else:
            self.image_display_area.setPixmap(QPixmap.fromImage(to_qimage(image)))
        update_details(self, image)
        self.update_button_states(state)

    def update_button_states(self, state: ViewState) -> None:
        self.prev_button.setEnabled(state.can_go_back)
        self.next_button.setEnabled(state.can_go_forward)

    def closeEvent(self, event):
        self.log.info("window_close")
        super().closeEvent(event)
