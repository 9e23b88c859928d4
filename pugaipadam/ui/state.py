from __future__ import annotations

from dataclasses import dataclass

from ..services.collection_store import CollectionStore
from .title_status import compose_details, compose_title


@dataclass(frozen=True)
class ViewState:
    title: str
    details: str
    can_go_back: bool
    can_go_forward: bool
    fullscreen: bool

    @property
    def header_visible(self) -> bool:
        # 전체화면에서는 헤더 바(탐색 크롬)를 숨긴다
        return not self.fullscreen

    @staticmethod
    def derive(store: CollectionStore, fullscreen: bool = False) -> "ViewState":
        return ViewState(
            title=compose_title(store),
            details=compose_details(store.current()),
            can_go_back=store.can_go_back(),
            can_go_forward=store.can_go_forward(),
            fullscreen=bool(fullscreen),
        )
