import os
import re
from typing import Iterable, List

from PIL import Image

from .logging_setup import get_logger
log = get_logger("utils.file")

VECTOR_FORMATS = (".svg",)
SORT_MODES = ("fs", "name", "natural")

_raster_extensions: frozenset[str] | None = None


def _normalize_ext(ext: str) -> str:
    ext = (ext or "").strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def raster_extensions() -> frozenset[str]:
    """Pillow이 열 수 있는(디코더가 등록된) 확장자 집합."""
    global _raster_extensions
    if _raster_extensions is None:
        Image.init()
        openable = set(Image.OPEN)
        _raster_extensions = frozenset(
            ext.lower() for ext, fmt in Image.registered_extensions().items() if fmt in openable
        )
        log.debug("raster_extensions | count=%d", len(_raster_extensions))
    return _raster_extensions


def is_raster_extension(ext: str) -> bool:
    return _normalize_ext(ext) in raster_extensions()


def is_vector_extension(ext: str) -> bool:
    return _normalize_ext(ext) in VECTOR_FORMATS


def extension_of(path: str) -> str:
    return os.path.splitext(path)[1].lower()


def natural_sort_key(path: str):
    """숫자를 숫자처럼 비교하는 자연 정렬 키(대소문자 무시).

    img2.png < img10.png
    """
    name = os.path.basename(path)
    parts = re.split(r"(\d+)", name)
    # 숫자/문자 토큰 타입이 섞여도 비교 가능하도록 (종류, 값) 쌍으로 구성
    return [(0, int(p), "") if p.isdigit() else (1, 0, p.lower()) for p in parts if p != ""]


def sort_paths(paths: Iterable[str], mode: str = "fs") -> List[str]:
    items = list(paths)
    if mode == "name":
        items.sort(key=lambda p: os.path.basename(p).lower())
    elif mode == "natural":
        items.sort(key=natural_sort_key)
    # "fs": 파일시스템 열거 순서 그대로(플랫폼마다 다를 수 있음)
    return items
