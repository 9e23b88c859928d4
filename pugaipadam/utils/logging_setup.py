import os
import sys
import uuid
import logging
import logging.handlers
import queue
from typing import Optional

_SESSION_ID = uuid.uuid4().hex[:8]
_listener: logging.handlers.QueueListener | None = None
_queue_handler: logging.handlers.QueueHandler | None = None
_stream_handler: logging.Handler | None = None

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | sid=%(session_id)s | %(message)s"


class _SessionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        if not hasattr(record, "session_id"):
            record.session_id = _SESSION_ID
        return True


def _default_log_dir() -> str:
    env = os.getenv("PUGAIPADAM_LOG_DIR")
    try:
        if env:
            path = os.path.abspath(os.path.expanduser(env))
        elif sys.platform == "win32":
            base = os.getenv("LOCALAPPDATA") or os.path.expanduser("~\\AppData\\Local")
            path = os.path.join(base, "Pugaipadam", "logs")
        else:
            base = os.getenv("XDG_STATE_HOME") or os.path.expanduser("~/.local/state")
            path = os.path.join(base, "Pugaipadam", "logs")
        os.makedirs(path, exist_ok=True)
        return path
    except OSError:
        return os.getcwd()


def resolve_level(level: str | int | None, default: int = logging.INFO) -> int:
    if isinstance(level, int):
        return level
    lvl = getattr(logging, str(level or "").strip().upper(), None)
    return lvl if isinstance(lvl, int) else default


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """Initialize app-wide logging with rotating file handler and queue listener."""
    global _listener, _queue_handler, _stream_handler
    # 환경 변수가 설정 값보다 우선
    lvl = resolve_level(os.getenv("PUGAIPADAM_LOG_LEVEL") or level)
    if _listener is not None:
        set_level(lvl)
        return

    root = logging.getLogger()
    q: "queue.Queue[logging.LogRecord]" = queue.Queue(maxsize=10000)
    qh = logging.handlers.QueueHandler(q)
    qh.addFilter(_SessionFilter())

    root.setLevel(lvl)
    root.addHandler(qh)
    _queue_handler = qh

    log_dir = log_dir or _default_log_dir()
    log_path = os.path.join(log_dir, "app.log")

    fmt = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = []
    try:
        fh = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=5 * 1024 * 1024, backupCount=10, encoding="utf-8"
        )
        fh.setFormatter(fmt)
        handlers.append(fh)
    except OSError:
        # 파일 로그를 열 수 없으면 stderr만 사용
        pass

    # 진단 메시지(거부된 확장자, 읽을 수 없는 폴더)는 stderr로도 나간다
    sh = logging.StreamHandler(stream=sys.stderr)
    sh.setLevel(lvl)
    sh.setFormatter(fmt)
    handlers.append(sh)
    _stream_handler = sh

    _listener = logging.handlers.QueueListener(q, *handlers, respect_handler_level=True)
    _listener.start()


def shutdown_logging() -> None:
    """큐를 비우고 핸들러를 닫는다. 다시 setup_logging을 호출할 수 있다."""
    global _listener, _queue_handler, _stream_handler
    if _listener is None:
        return
    try:
        _listener.stop()
    finally:
        if _queue_handler is not None:
            logging.getLogger().removeHandler(_queue_handler)
        for h in _listener.handlers:
            h.close()
        _listener = None
        _queue_handler = None
        _stream_handler = None


def set_level(level: str | int) -> None:
    lvl = resolve_level(level)
    logging.getLogger().setLevel(lvl)
    if _stream_handler is not None:
        _stream_handler.setLevel(lvl)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"pugaipadam.{name}")


def get_log_dir() -> str:
    """현재 사용 중인 로그 디렉터리 반환."""
    return _default_log_dir()


def get_session_id() -> str:
    return _SESSION_ID
