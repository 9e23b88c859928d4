from __future__ import annotations

import atexit
import sys
from typing import List, Optional, Sequence

from PyQt6.QtWidgets import QApplication  # type: ignore[import]

from .services.collection_store import CollectionStore
from .services.discovery import discover_paths
from .services.image_service import ImageService
from .storage.settings_store import ViewerSettings, load_settings, open_settings
from .ui.interaction import InteractionHandler
from .ui.main_window import PugaipadamViewer
from .utils.logging_setup import get_logger, setup_logging, shutdown_logging

log = get_logger("app")


def path_args(argv: Sequence[str]) -> List[str]:
    # "-cover.png" 같은 파일명도 경로로 유지한다
    return [a for a in argv if a]


def launch_args(app: QApplication, argv: Sequence[str], created: bool) -> List[str]:
    """직접 만든 QApplication이면 Qt 옵션이 제거된 arguments()를, 아니면 argv를 쓴다."""
    raw = app.arguments()[1:] if created else list(argv[1:])
    return path_args(raw)


def build_viewer(args: Sequence[str], cfg: ViewerSettings, image_service: Optional[ImageService] = None) -> PugaipadamViewer:
    """인자 → 경로 탐색 → 디코드 → 컬렉션 → 창. QApplication이 이미 있어야 한다."""
    found = discover_paths(args, sort_mode=cfg.dir_sort_mode, accept_svg=cfg.accept_svg)
    loaded = (image_service or ImageService()).load_collection(found.paths)
    if found.paths and not loaded.items:
        log.error("all_decodes_failed | count=%d", len(found.paths))
    store = CollectionStore(loaded.items, wrap=cfg.nav_wrap_ends)
    handler = InteractionHandler(store)
    viewer = PugaipadamViewer(handler, cfg.custom_keys)
    handler.refresh()
    return viewer


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    existing = QApplication.instance()
    app = existing or QApplication(argv)
    cfg = load_settings(open_settings())
    setup_logging(cfg.log_level)
    atexit.register(shutdown_logging)
    log.info("app_start | args=%d", max(0, len(argv) - 1))
    try:
        viewer = build_viewer(launch_args(app, argv, created=existing is None), cfg)
        viewer.show()
        code = app.exec()
    except Exception:
        log.exception("app_crash")
        raise
    log.info("app_exit | code=%d", code)
    return int(code)


if __name__ == "__main__":
    sys.exit(main())
