from PyQt6.QtWidgets import QGraphicsView, QGraphicsScene, QGraphicsPixmapItem, QGraphicsSimpleTextItem, QFrame  # type: ignore[import]
from PyQt6.QtGui import QPixmap, QTransform, QPainter, QColor, QBrush  # type: ignore[import]
from PyQt6.QtCore import Qt, QSize  # type: ignore[import]


class ImageView(QGraphicsView):
    """현재 이미지를 그리는 뷰. 기본은 화면 맞춤, 휠로 확대/축소, 드래그로 이동."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)
        self._pix_item = None  # type: QGraphicsPixmapItem | None
        self._original_pixmap = None  # type: QPixmap | None
        self._placeholder = ""

        rh = self.renderHints()
        rh |= QPainter.RenderHint.SmoothPixmapTransform
        rh |= QPainter.RenderHint.Antialiasing
        self.setRenderHints(rh)
        self.setTransformationAnchor(QGraphicsView.ViewportAnchor.AnchorUnderMouse)
        self.setResizeAnchor(QGraphicsView.ViewportAnchor.AnchorViewCenter)
        self.setDragMode(QGraphicsView.DragMode.ScrollHandDrag)
        self.setBackgroundBrush(QBrush(QColor("#373737")))
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.viewport().setCursor(Qt.CursorShape.ArrowCursor)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        # 키 입력은 창 단축키로 넘긴다
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)

        # Zoom state
        self._current_scale = 1.0
        self._fit_mode = True
        self._min_scale = 0.01  # 1%
        self._max_scale = 16.0  # 1600%

    def setPixmap(self, pixmap: QPixmap | None):
        self._scene.clear()
        self._pix_item = None
        self._original_pixmap = None
        if pixmap and not pixmap.isNull():
            self._pix_item = QGraphicsPixmapItem(pixmap)
            self._pix_item.setTransformationMode(Qt.TransformationMode.SmoothTransformation)
            self._scene.addItem(self._pix_item)
            self._original_pixmap = pixmap
            self._scene.setSceneRect(self._pix_item.boundingRect())
            self.fit_to_window()
        else:
            self.resetTransform()
            self._current_scale = 1.0
            if self._placeholder:
                item = QGraphicsSimpleTextItem(self._placeholder)
                item.setBrush(QBrush(QColor("#EAEAEA")))
                self._scene.addItem(item)
                self._scene.setSceneRect(item.boundingRect())
            self.centerOn(self._scene.sceneRect().center())

    def set_placeholder_text(self, text: str) -> None:
        self._placeholder = text or ""
        if self._pix_item is None:
            self.setPixmap(None)

    def originalPixmap(self) -> QPixmap | None:
        return self._original_pixmap

    def current_scale(self) -> float:
        return self._current_scale

    def _apply_fit(self):
        if not self._pix_item or not self._original_pixmap:
            return
        w = self._original_pixmap.width()
        h = self._original_pixmap.height()
        vp = self.viewport().rect()
        if w <= 0 or h <= 0 or vp.isEmpty():
            return
        desired = min(max(1.0, float(vp.width())) / w, max(1.0, float(vp.height())) / h)
        self._set_scale(desired)

    def _set_scale(self, scale: float):
        scale = max(self._min_scale, min(self._max_scale, scale))
        t = QTransform()
        t.scale(scale, scale)
        self.setTransform(t)
        self._current_scale = scale

    def fit_to_window(self):
        self._fit_mode = True
        self._apply_fit()
        if self._pix_item is not None:
            self.centerOn(self._pix_item)

    def zoom_step(self, factor: float):
        if self._pix_item is None:
            return
        self._fit_mode = False
        self._set_scale(self._current_scale * factor)

    def zoom_in(self):
        self.zoom_step(1.25)

    def zoom_out(self):
        self.zoom_step(0.8)

    def sizeHint(self) -> QSize:
        return QSize(960, 640)

    def wheelEvent(self, event):
        dy = event.angleDelta().y()
        if dy > 0:
            self.zoom_in()
        elif dy < 0:
            self.zoom_out()
        event.accept()

    def mouseDoubleClickEvent(self, event):
        self.fit_to_window()
        event.accept()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        # 화면 맞춤 모드는 크기 변화에도 유지
        if self._fit_mode:
            self.fit_to_window()
