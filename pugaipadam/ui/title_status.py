from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..services.collection_store import CollectionStore
from ..services.image_service import ImageRepresentation

if TYPE_CHECKING:
    from .main_window import PugaipadamViewer

APP_NAME = "Pugaipadam"
NO_IMAGES_TITLE = "이미지 없음"


def compose_title(store: CollectionStore) -> str:
    image = store.current()
    if image is None:
        return NO_IMAGES_TITLE
    return f"{image.display_name} ({store.position}/{len(store)})"


def compose_details(image: Optional[ImageRepresentation]) -> str:
    if image is None:
        return ""
    return f"{image.source_path} - {image.width}x{image.height} pixels"


def update_window_title(viewer: "PugaipadamViewer", title: str) -> None:
    viewer.setWindowTitle(f"{title} - {APP_NAME}")


def update_details(viewer: "PugaipadamViewer", image: Optional[ImageRepresentation]) -> None:
    viewer.details_label.setText(compose_details(image))
