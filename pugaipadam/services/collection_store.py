from __future__ import annotations

from typing import Iterable, Optional, Tuple

from .image_service import ImageRepresentation


class CollectionStore:
    """디코드된 이미지의 순서 있는 컬렉션과 현재 위치.

    경계 정책은 인스턴스마다 고정된다.
    - wrap=True (기본): 끝에서 반대쪽으로 순환
    - wrap=False: 끝에서 멈춤
    비어 있지 않으면 current_index는 항상 [0, len) 범위다.
    """

    def __init__(self, items: Iterable[ImageRepresentation] = (), *, wrap: bool = True):
        self._wrap = bool(wrap)
        self._items: Tuple[ImageRepresentation, ...] = ()
        self._index: Optional[int] = None
        self.replace(items)

    # --- 조회 ---
    @property
    def items(self) -> Tuple[ImageRepresentation, ...]:
        return self._items

    @property
    def wrap(self) -> bool:
        return self._wrap

    @property
    def current_index(self) -> Optional[int]:
        return self._index

    @property
    def position(self) -> int:
        """1부터 시작하는 표시용 위치(비어 있으면 0)."""
        return 0 if self._index is None else self._index + 1

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def current(self) -> Optional[ImageRepresentation]:
        if self._index is None:
            return None
        return self._items[self._index]

    def can_go_back(self) -> bool:
        if self._index is None:
            return False
        if self._wrap:
            return len(self._items) > 1
        return self._index > 0

    def can_go_forward(self) -> bool:
        if self._index is None:
            return False
        if self._wrap:
            return len(self._items) > 1
        return self._index < len(self._items) - 1

    # --- 이동 ---
    def advance(self) -> bool:
        """다음 항목으로. 위치가 바뀌었으면 True."""
        if self._index is None:
            return False
        last = len(self._items) - 1
        if self._index < last:
            self._index += 1
        elif self._wrap and last > 0:
            self._index = 0
        else:
            return False
        return True

    def retreat(self) -> bool:
        """이전 항목으로. 위치가 바뀌었으면 True."""
        if self._index is None:
            return False
        last = len(self._items) - 1
        if self._index > 0:
            self._index -= 1
        elif self._wrap and last > 0:
            self._index = last
        else:
            return False
        return True

    def go_to(self, index: int) -> bool:
        if self._index is None:
            return False
        count = len(self._items)
        if not -count <= index < count:
            raise IndexError(f"index {index} out of range for {count} items")
        index %= count
        if index == self._index:
            return False
        self._index = index
        return True

    def first(self) -> bool:
        return self.go_to(0)

    def last(self) -> bool:
        return self.go_to(-1)

    def replace(self, items: Iterable[ImageRepresentation]) -> None:
        """컬렉션 교체. 위치는 처음으로 되돌린다."""
        self._items = tuple(items)
        self._index = 0 if self._items else None

    def __repr__(self) -> str:
        return f"CollectionStore(count={len(self._items)}, index={self._index}, wrap={self._wrap})"
