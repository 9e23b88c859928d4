from PyQt6.QtCore import QTimer


def enter_fullscreen(viewer):
    # 현재 창 상태 저장
    viewer.previous_window_state = {
        'geometry': viewer.geometry(),
        'maximized': viewer.isMaximized(),
    }

    # 레이아웃 마진 제거
    margins = viewer.main_layout.contentsMargins()
    viewer._normal_margins = (margins.left(), margins.top(), margins.right(), margins.bottom())
    viewer.main_layout.setContentsMargins(0, 0, 0, 0)

    viewer.showFullScreen()
    QTimer.singleShot(0, viewer.image_display_area.fit_to_window)


def exit_fullscreen(viewer):
    prev = getattr(viewer, "previous_window_state", None)
    if prev and prev['maximized']:
        viewer.showMaximized()
    else:
        viewer.showNormal()
        if prev:
            QTimer.singleShot(10, viewer._restore_previous_geometry)

    # 레이아웃 마진 복원
    l, t, r, b = getattr(viewer, "_normal_margins", (5, 5, 5, 5))
    viewer.main_layout.setContentsMargins(l, t, r, b)

    QTimer.singleShot(0, viewer.image_display_area.fit_to_window)
