import os
import sys

import pytest

# 화면 없는 환경에서도 위젯 테스트가 돌도록
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402
from PIL import Image  # noqa: E402

app = None


@pytest.fixture(scope="session", autouse=True)
def _app():
    global app
    if QApplication.instance() is None:
        app = QApplication(sys.argv[:1])
    else:
        app = QApplication.instance()
    yield app


def make_png(path, size=(3, 2), color=(255, 0, 0, 255)) -> str:
    Image.new("RGBA", size, color).save(str(path), format="PNG")
    return str(path)


@pytest.fixture
def image_dir(tmp_path):
    """a.png, b.txt, c.jpg 가 들어 있는 폴더."""
    make_png(tmp_path / "a.png")
    (tmp_path / "b.txt").write_text("not an image", encoding="utf-8")
    Image.new("RGB", (4, 4), (0, 255, 0)).save(str(tmp_path / "c.jpg"), format="JPEG")
    return tmp_path
