from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget, QLabel, QSizePolicy  # type: ignore[import]
from PyQt6.QtCore import Qt  # type: ignore[import]

if TYPE_CHECKING:
    from .main_window import PugaipadamViewer


def build_header_bar(viewer: "PugaipadamViewer") -> None:
    viewer.button_layout = QHBoxLayout()
    viewer.button_layout.setContentsMargins(0, 0, 0, 0)

    viewer.prev_button = QPushButton("이전")
    viewer.next_button = QPushButton("다음")
    viewer.prev_button.clicked.connect(viewer.show_prev_image)
    viewer.next_button.clicked.connect(viewer.show_next_image)

    viewer.fullscreen_button = QPushButton("전체화면")
    viewer.fullscreen_button.clicked.connect(viewer.toggle_fullscreen)

    # 오른쪽: 경로와 픽셀 크기
    viewer.details_label = QLabel("", viewer)
    viewer.details_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
    viewer.details_label.setStyleSheet("color: #EAEAEA;")

    button_style = "color: #EAEAEA;"
    for btn in [viewer.prev_button, viewer.next_button, viewer.fullscreen_button]:
        btn.setStyleSheet(button_style)
        btn.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        # 버튼이 포커스를 가져가 화살표 키를 먹지 않도록
        btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)

    viewer.button_layout.addWidget(viewer.prev_button)
    viewer.button_layout.addWidget(viewer.next_button)
    viewer.button_layout.addWidget(viewer.fullscreen_button)
    viewer.button_layout.addStretch(1)
    viewer.button_layout.addWidget(viewer.details_label)

    viewer.button_bar = QWidget()
    viewer.button_bar.setStyleSheet("background-color: transparent;")
    viewer.button_bar.setLayout(viewer.button_layout)
    viewer.main_layout.insertWidget(0, viewer.button_bar)
