from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, List

from ..errors import DiscoveryError, PugaipadamError, UnsupportedExtension
from ..utils.file_utils import extension_of, is_raster_extension, is_vector_extension, sort_paths
from ..utils.logging_setup import get_logger

log = get_logger("services.discovery")


@dataclass
class DiscoveryResult:
    paths: List[str] = field(default_factory=list)
    # 치명적이지 않은 진단(읽을 수 없는 폴더, 거부된 확장자)
    issues: List[PugaipadamError] = field(default_factory=list)


def scan_directory(dir_path: str, sort_mode: str = "fs") -> List[str]:
    """폴더 바로 아래의 래스터 이미지 파일 목록(비재귀).

    OSError는 호출자에게 전파된다.
    """
    found: List[str] = []
    with os.scandir(dir_path) as it:
        for entry in it:
            try:
                if not entry.is_file():
                    continue
            except OSError:
                continue
            if is_raster_extension(extension_of(entry.name)):
                found.append(os.path.join(dir_path, entry.name))
    return sort_paths(found, sort_mode)


def _accept_file(path: str, accept_svg: bool) -> bool:
    ext = extension_of(path)
    if is_raster_extension(ext):
        return True
    return accept_svg and is_vector_extension(ext)


def discover_paths(args: Iterable[str], *, sort_mode: str = "fs", accept_svg: bool = True) -> DiscoveryResult:
    """명령줄 인자(파일/폴더)를 디코드할 이미지 경로의 평탄한 목록으로 확장."""
    result = DiscoveryResult()
    arg_list = list(args)
    for raw in arg_list:
        if not raw:
            continue
        path = os.path.expanduser(raw)
        if os.path.isdir(path):
            try:
                children = scan_directory(path, sort_mode)
            except OSError as e:
                err = DiscoveryError(path, e.strerror or str(e))
                log.warning("scan_dir_os_error | dir=%s | err=%s", path, err.reason)
                result.issues.append(err)
                continue
            log.info("scan_dir_done | dir=%s | count=%d", path, len(children))
            result.paths.extend(children)
        elif os.path.isfile(path):
            if _accept_file(path, accept_svg):
                result.paths.append(path)
            else:
                err = UnsupportedExtension(path)
                log.warning("unsupported_extension | file=%s", path)
                result.issues.append(err)
        else:
            # 존재하지 않는 인자는 조용히 버린다
            log.debug("arg_not_found | arg=%s", raw)
    log.info("discover_done | args=%d | paths=%d | issues=%d", len(arg_list), len(result.paths), len(result.issues))
    return result
