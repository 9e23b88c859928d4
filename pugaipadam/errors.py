from __future__ import annotations


class PugaipadamError(Exception):
    """뷰어 코어의 기본 예외."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}" if reason else path)


class DiscoveryError(PugaipadamError):
    """디렉터리를 열거할 수 없음. 해당 인자는 항목을 기여하지 않는다."""


class UnsupportedExtension(PugaipadamError):
    """이미지 확장자가 아닌 파일 인자."""

    def __init__(self, path: str, reason: str = "unsupported extension"):
        super().__init__(path, reason)


class DecodeError(PugaipadamError):
    """열기/포맷 판별/픽셀 해석 실패."""
