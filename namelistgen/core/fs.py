# namelistgen/core/fs.py

from __future__ import annotations

from pathlib import Path, PurePosixPath

from loguru import logger

from namelistgen.core.errors import DestinationError


def file_extension(file_name: str) -> str:
    """
    마지막 '.' 부터 끝까지를 확장자로 본다.
    - ".DS_Store" -> ".DS_Store"
    - "a.tar.gz" -> ".gz"
    - "README", "name." -> ""
    """
    name = PurePosixPath(file_name).name
    idx = name.rfind(".")
    if idx == -1 or idx == len(name) - 1:
        return ""
    return name[idx:]


def file_name_without_extension(path: str) -> str:
    """마지막 경로 요소에서 확장자를 뗀 이름 (".DS_Store" -> "")."""
    name = PurePosixPath(path).name
    idx = name.rfind(".")
    if idx == -1:
        return name
    return name[:idx]


def destination_path(folder: Path, file_name: str, extension: str) -> Path:
    return Path(folder) / f"{file_name}{extension}"


def write_document(path: Path, text: str) -> Path:
    """생성 결과를 한 번에 기록 (기존 파일은 덮어씀)."""
    folder = path.parent
    if not folder.is_dir():
        raise DestinationError(
            f"생성 대상 폴더가 없습니다: {folder}", detail={"path": str(path)}
        )
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise DestinationError(
            f"파일 저장 중 오류 발생: {path}", detail={"path": str(path), "error": str(e)}
        ) from e

    logger.debug(f"wrote {len(text)} chars -> {path}")
    return path
