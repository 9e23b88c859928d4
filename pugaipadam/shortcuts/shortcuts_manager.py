from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtCore import Qt

from ..ui.interaction import ViewerEvent
from ..utils.logging_setup import get_logger

log = get_logger("shortcuts")


@dataclass(frozen=True)
class Command:
    id: str
    label: str
    desc: str
    event: ViewerEvent
    default_keys: List[str]
    lock_key: bool = False  # true면 사용자 재매핑 불가(Esc 등)


# 명령 레지스트리
COMMANDS: List[Command] = [
    Command("show_prev_image", "이전 이미지", "이전 파일로 이동", ViewerEvent.KEY_LEFT, ["Left"]),
    Command("show_next_image", "다음 이미지", "다음 파일로 이동", ViewerEvent.KEY_RIGHT, ["Right"]),
    Command("show_first_image", "첫 이미지", "첫 파일로 이동", ViewerEvent.FIRST, ["Home"]),
    Command("show_last_image", "마지막 이미지", "마지막 파일로 이동", ViewerEvent.LAST, ["End"]),
    Command("toggle_fullscreen", "전체화면 토글", "전체화면 전환", ViewerEvent.TOGGLE_FULLSCREEN, ["F11", "F"]),
    Command("handle_escape", "전체화면 종료", "Esc 동작", ViewerEvent.ESCAPE, ["Escape"], lock_key=True),
]


def get_effective_keymap(custom: Optional[Mapping[str, List[str]]] = None) -> Dict[str, List[str]]:
    custom = custom or {}
    eff: Dict[str, List[str]] = {}
    for cmd in COMMANDS:
        # 고정키는 기본값 고정
        if cmd.lock_key:
            eff[cmd.id] = cmd.default_keys[:]
            continue
        # 사용자 지정이 있으면 기본값을 대체
        keys = [str(k).strip() for k in (custom.get(cmd.id) or cmd.default_keys) if str(k).strip()]
        merged: List[str] = []
        for k in keys:
            if k not in merged:
                merged.append(k)
        eff[cmd.id] = merged
    return eff


def apply_shortcuts(viewer, custom: Optional[Mapping[str, List[str]]] = None) -> None:
    # 기존 단축키 제거
    for sc in getattr(viewer, "_shortcuts", []) or []:
        sc.setParent(None)
    viewer._shortcuts = []

    eff = get_effective_keymap(custom)
    for cmd in COMMANDS:
        for key in eff.get(cmd.id, []):
            seq = QKeySequence(key)
            if seq.isEmpty():
                log.warning("shortcut_parse_fail | cmd=%s | key=%s", cmd.id, key)
                continue
            sc = QShortcut(seq, viewer)
            sc.setContext(Qt.ShortcutContext.WindowShortcut)
            sc.activated.connect(lambda ev=cmd.event: viewer.dispatch(ev))
            viewer._shortcuts.append(sc)
    log.debug("shortcuts_applied | count=%d", len(viewer._shortcuts))
