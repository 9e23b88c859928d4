import os
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from PIL import Image, ImageOps, UnidentifiedImageError
from PyQt6.QtCore import QSize, Qt  # type: ignore[import]
from PyQt6.QtGui import QImage, QPainter  # type: ignore[import]
from PyQt6.QtSvg import QSvgRenderer  # type: ignore[import]

from ..errors import DecodeError
from ..utils.file_utils import extension_of, is_vector_extension
from ..utils.logging_setup import get_logger

log = get_logger("services.image")

BYTES_PER_PIXEL = 4
# 크기 정보가 없는 SVG의 렌더링 크기
SVG_FALLBACK_SIZE = (512, 512)


@dataclass(frozen=True)
class ImageRepresentation:
    width: int
    height: int
    pixel_buffer: bytes = field(repr=False)  # RGBA8, 행 우선, 패딩 없음
    source_path: str
    display_name: str

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise DecodeError(self.source_path, f"invalid dimensions {self.width}x{self.height}")
        expected = self.width * self.height * BYTES_PER_PIXEL
        if len(self.pixel_buffer) != expected:
            raise DecodeError(
                self.source_path,
                f"pixel buffer length {len(self.pixel_buffer)} != {expected}",
            )

    @classmethod
    def from_pixels(cls, path: str, width: int, height: int, pixels: bytes) -> "ImageRepresentation":
        name = os.path.basename(os.path.normpath(path)) or path
        return cls(int(width), int(height), bytes(pixels), path, name)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height


def _decode_raster(path: str) -> ImageRepresentation:
    try:
        with Image.open(path) as im:
            # 애니메이션은 첫 프레임만
            im.seek(0)
            im.load()
            # EXIF Orientation 반영
            im = ImageOps.exif_transpose(im)
            rgba = im.convert("RGBA")
            w, h = rgba.size
            data = rgba.tobytes()
    except FileNotFoundError as e:
        raise DecodeError(path, "file not found") from e
    except UnidentifiedImageError as e:
        raise DecodeError(path, "unknown image format") from e
    except Image.DecompressionBombError as e:
        raise DecodeError(path, str(e)) from e
    except (OSError, SyntaxError, ValueError, EOFError) as e:
        raise DecodeError(path, str(e) or e.__class__.__name__) from e
    except Exception as e:
        # 손상된 데이터에서 플러그인이 던지는 기타 예외(IndexError 등)
        raise DecodeError(path, str(e) or e.__class__.__name__) from e
    return ImageRepresentation.from_pixels(path, w, h, data)


def _qimage_rgba_bytes(img: QImage) -> bytes:
    # 스캔라인 패딩을 제거하며 복사
    w, h = img.width(), img.height()
    row = w * BYTES_PER_PIXEL
    stride = img.bytesPerLine()
    ptr = img.constBits()
    ptr.setsize(img.sizeInBytes())
    raw = bytes(ptr)
    if stride == row:
        return raw[: row * h]
    return b"".join(raw[y * stride: y * stride + row] for y in range(h))


def _decode_svg(path: str) -> ImageRepresentation:
    if not os.path.isfile(path):
        raise DecodeError(path, "file not found")
    renderer = QSvgRenderer(path)
    if not renderer.isValid():
        raise DecodeError(path, "invalid svg document")
    size = renderer.defaultSize()
    if size.isEmpty():
        size = QSize(*SVG_FALLBACK_SIZE)
    img = QImage(size, QImage.Format.Format_RGBA8888)
    if img.isNull():
        raise DecodeError(path, "svg too large to render")
    img.fill(Qt.GlobalColor.transparent)
    painter = QPainter(img)
    try:
        renderer.render(painter)
    finally:
        painter.end()
    return ImageRepresentation.from_pixels(path, img.width(), img.height(), _qimage_rgba_bytes(img))


def decode_image(path: str) -> ImageRepresentation:
    """파일 하나를 RGBA8 버퍼로 완전히 디코드한다(동기, 블로킹).

    실패 시 DecodeError. 복구는 시도하지 않는다.
    """
    if is_vector_extension(extension_of(path)):
        rep = _decode_svg(path)
    else:
        rep = _decode_raster(path)
    log.debug("decode_ok | file=%s | w=%d | h=%d", rep.display_name, rep.width, rep.height)
    return rep


def to_qimage(rep: ImageRepresentation) -> QImage:
    img = QImage(rep.pixel_buffer, rep.width, rep.height, rep.width * BYTES_PER_PIXEL, QImage.Format.Format_RGBA8888)
    # 버퍼 수명과 분리
    return img.copy()


@dataclass
class LoadResult:
    items: List[ImageRepresentation] = field(default_factory=list)
    failures: List[DecodeError] = field(default_factory=list)


class ImageService:
    """경로 목록을 디코드해 컬렉션 항목을 만든다.

    한 파일의 실패가 전체를 막지 않도록 건너뛰고 기록한다.
    """

    def __init__(self, decoder=decode_image):
        self._decode = decoder

    def load_collection(self, paths: Iterable[str]) -> LoadResult:
        result = LoadResult()
        for path in paths:
            try:
                result.items.append(self._decode(path))
            except DecodeError as e:
                log.warning("decode_fail_skip | file=%s | err=%s", path, e.reason)
                result.failures.append(e)
        log.info("load_collection_done | ok=%d | failed=%d", len(result.items), len(result.failures))
        return result
