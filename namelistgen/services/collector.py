# namelistgen/services/collector.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from loguru import logger

from namelistgen.core.config import DEFAULT_IGNORE_EXTENSIONS
from namelistgen.core.errors import SearchFolderError
from namelistgen.core.fs import file_extension


def is_ignored(file_name: str, ignore_extensions: Iterable[str]) -> bool:
    """무시 확장자 목록에 포함된 확장자인지 판정 (대소문자 구분, 완전 일치)."""
    return file_extension(file_name) in set(ignore_extensions)


def _iter_files(root: Path, include_subfolders: bool) -> Iterator[Path]:
    # 두 모드 모두 is_file() 기준 (깨진 심볼릭 링크 제외)
    if include_subfolders:
        for current, _dirs, files in os.walk(root):
            for file in files:
                path = Path(current) / file
                if path.is_file():
                    yield path
        return

    with os.scandir(root) as it:
        for entry in it:
            if entry.is_file():
                yield Path(entry.path)


def collect_file_names(
    search_folder: Path,
    include_subfolders: bool = True,
    ignore_extensions: Optional[Iterable[str]] = None,
    sort: bool = False,
) -> List[str]:
    """
    검색 폴더 아래의 파일을 모아 검색 폴더 기준 상대 경로 리스트를 만든다.

    - 순서: 파일시스템 탐색 순서 (sort=True 면 상대 경로 정렬)
    - 무시 확장자는 제외, 중복 경로는 처음 것만 남김
    - 상대 경로 구분자는 항상 '/'
    """
    root = Path(search_folder)
    if not root.exists():
        raise SearchFolderError(f"검색 폴더가 없습니다: {root}")
    if not root.is_dir():
        raise SearchFolderError(f"검색 폴더가 디렉터리가 아닙니다: {root}")

    ignore = set(DEFAULT_IGNORE_EXTENSIONS if ignore_extensions is None else ignore_extensions)

    names: List[str] = []
    seen: set[str] = set()
    ignored = 0
    for file_path in _iter_files(root, include_subfolders):
        if is_ignored(file_path.name, ignore):
            ignored += 1
            continue

        relative = file_path.relative_to(root).as_posix()
        if relative in seen:
            continue
        seen.add(relative)
        names.append(relative)

    if sort:
        names.sort()

    logger.info(
        f"collected {len(names)} files from {root} "
        f"(ignored={ignored}, subfolders={include_subfolders})"
    )
    return names
