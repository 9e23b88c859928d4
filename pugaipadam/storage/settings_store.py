from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from PyQt6.QtCore import QSettings  # type: ignore[import]

from ..utils.file_utils import SORT_MODES
from ..utils.logging_setup import get_logger

log = get_logger("storage.settings")

ORG_NAME = "Pugaipadam"
APP_NAME = "Pugaipadam"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ViewerSettings:
    nav_wrap_ends: bool = True
    dir_sort_mode: str = "fs"
    accept_svg: bool = True
    log_level: str = "INFO"
    # cmd_id -> 키 시퀀스 목록
    custom_keys: Dict[str, List[str]] = field(default_factory=dict)


def open_settings() -> QSettings:
    return QSettings(ORG_NAME, APP_NAME)


def _to_bool(raw) -> Optional[bool]:
    # INI 백엔드는 bool을 문자열로 돌려준다
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, (int, float)):
        return bool(raw)
    s = str(raw).strip().lower()
    if s in ("1", "true", "yes", "on"):
        return True
    if s in ("0", "false", "no", "off"):
        return False
    return None


def _read_bool(settings: QSettings, key: str, default: bool) -> bool:
    if not settings.contains(key):
        return default
    raw = settings.value(key)
    value = _to_bool(raw)
    if value is None:
        log.warning("settings_invalid | key=%s | value=%s", key, raw)
        return default
    return value


def _split_keys(raw) -> List[str]:
    if isinstance(raw, (list, tuple)):
        raw = ";".join(str(x) for x in raw)
    return [p.strip() for p in str(raw or "").split(";") if p.strip()]


def load_settings(settings: QSettings) -> ViewerSettings:
    cfg = ViewerSettings()
    cfg.nav_wrap_ends = _read_bool(settings, "nav/wrap_ends", cfg.nav_wrap_ends)

    mode = str(settings.value("dir/sort_mode", cfg.dir_sort_mode) or "").strip().lower()
    if mode in SORT_MODES:
        cfg.dir_sort_mode = mode
    else:
        log.warning("settings_invalid | key=dir/sort_mode | value=%s", mode)

    cfg.accept_svg = _read_bool(settings, "open/accept_svg", cfg.accept_svg)

    level = str(settings.value("log/level", cfg.log_level) or "").strip().upper()
    if level in LOG_LEVELS:
        cfg.log_level = level
    else:
        log.warning("settings_invalid | key=log/level | value=%s", level)

    settings.beginGroup("keys/custom")
    try:
        for cmd_id in settings.childKeys():
            parts = _split_keys(settings.value(cmd_id, ""))
            if parts:
                cfg.custom_keys[str(cmd_id)] = parts
    finally:
        settings.endGroup()
    return cfg


def save_settings(settings: QSettings, cfg: ViewerSettings) -> None:
    settings.setValue("nav/wrap_ends", bool(cfg.nav_wrap_ends))
    settings.setValue("dir/sort_mode", str(cfg.dir_sort_mode))
    settings.setValue("open/accept_svg", bool(cfg.accept_svg))
    settings.setValue("log/level", str(cfg.log_level))
    for cmd_id, keys in (cfg.custom_keys or {}).items():
        settings.setValue(f"keys/custom/{cmd_id}", ";".join(keys))
    settings.sync()
