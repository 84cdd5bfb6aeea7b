# namelistgen/services/renderer.py
# =============================================================================
# 이름 리스트 렌더러
#
# - 루트 템플릿: NameListsTemplate.txt / NameDictionaryTemplate.txt
# - #NAMESPACE# / #CLASSNAME# 는 루트 템플릿 전체에서 치환
# - 루트 템플릿 안의 라인 템플릿 문자열은 렌더링된 블록
#   (수집된 이름당 한 줄)으로 한 번만 치환
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from loguru import logger

from namelistgen.core.config import BUNDLED_TEMPLATE_DIR
from namelistgen.core.errors import TemplateAssetError
from namelistgen.core.fs import file_name_without_extension
from namelistgen.schemas.common import OutputMode

# ============================================================
# 치환 대상
# ============================================================
NAMESPACE_REPLACE_TARGET = "#NAMESPACE#"
CLASS_NAME_REPLACE_TARGET = "#CLASSNAME#"
FILE_NAME_REPLACE_TARGET = "#FILENAME#"
FILE_NAME_VALUE_REPLACE_TARGET = "#filename#"

FILE_LIST_TEMPLATE = '        public static readonly string #FILENAME# = "#filename#";'
FILE_DICTIONARY_TEMPLATE = '                {"#FILENAME#", "#filename#"},'

LINE_TEMPLATES: Dict[OutputMode, str] = {
    OutputMode.FIELDS: FILE_LIST_TEMPLATE,
    OutputMode.DICTIONARY: FILE_DICTIONARY_TEMPLATE,
}

TEMPLATE_ASSETS: Dict[OutputMode, str] = {
    OutputMode.FIELDS: "NameListsTemplate.txt",
    OutputMode.DICTIONARY: "NameDictionaryTemplate.txt",
}


@dataclass
class RenderedDocument:
    text: str
    rendered: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    duplicate_identifiers: List[str] = field(default_factory=list)


# ============================================================
# 템플릿 선택 / 로드
# ============================================================
def line_template_for(mode: Union[OutputMode, str]) -> str:
    return LINE_TEMPLATES[OutputMode(mode)]


def template_asset_path(mode: Union[OutputMode, str], template_dir: Optional[Path] = None) -> Path:
    folder = Path(template_dir) if template_dir is not None else BUNDLED_TEMPLATE_DIR
    return folder / TEMPLATE_ASSETS[OutputMode(mode)]


def load_code_template(mode: Union[OutputMode, str], template_dir: Optional[Path] = None) -> str:
    """모드에 맞는 코드 템플릿을 읽는다. 없으면 TemplateAssetError."""
    path = template_asset_path(mode, template_dir)
    if not path.is_file():
        raise TemplateAssetError(
            f"코드 템플릿을 찾을 수 없습니다: {path}",
            detail={"mode": OutputMode(mode).value, "path": str(path)},
        )
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateAssetError(
            f"코드 템플릿 읽기 오류: {path}", detail={"error": str(e)}
        ) from e


def replace_code_template(template: str, namespace: str, class_name: str) -> str:
    """템플릿의 namespace / class 이름 치환 (모든 위치)."""
    text = template.replace(NAMESPACE_REPLACE_TARGET, namespace)
    return text.replace(CLASS_NAME_REPLACE_TARGET, class_name)


# ============================================================
# 라인 렌더링
# ============================================================
def identifier_for(mode: Union[OutputMode, str], base_name: str) -> str:
    """Fields: 변수명으로 쓰므로 공백 제거. Dictionary: 키는 그대로."""
    if OutputMode(mode) is OutputMode.FIELDS:
        return base_name.replace(" ", "")
    return base_name


def render_line(mode: Union[OutputMode, str], relative_path: str) -> Optional[str]:
    base_name = file_name_without_extension(relative_path)
    if not base_name or not base_name.strip():
        return None

    line = line_template_for(mode)
    return line.replace(FILE_NAME_REPLACE_TARGET, identifier_for(mode, base_name)).replace(
        FILE_NAME_VALUE_REPLACE_TARGET, relative_path
    )


def _render_lines(mode: OutputMode, names: Iterable[str]) -> RenderedDocument:
    result = RenderedDocument(text="")
    lines: List[str] = []
    seen_ids: set[str] = set()

    for name in names:
        line = render_line(mode, name)
        if line is None:
            logger.debug(f"skip empty name: {name!r}")
            result.skipped.append(name)
            continue

        ident = identifier_for(mode, file_name_without_extension(name))
        if ident in seen_ids and ident not in result.duplicate_identifiers:
            result.duplicate_identifiers.append(ident)
        seen_ids.add(ident)

        lines.append(line)
        result.rendered.append(name)

    result.text = "\n".join(lines)
    return result


def render_name_block(mode: Union[OutputMode, str], names: Iterable[str]) -> str:
    """수집된 이름 → 한 줄씩 렌더링 후 '\\n' 으로 연결."""
    return _render_lines(OutputMode(mode), names).text


# ============================================================
# 문서 조립
# ============================================================
def render_document(
    mode: Union[OutputMode, str],
    template: str,
    namespace: str,
    class_name: str,
    names: Iterable[str],
) -> RenderedDocument:
    mode = OutputMode(mode)
    line_template = line_template_for(mode)

    text = replace_code_template(template, namespace, class_name)
    if line_template not in text:
        raise TemplateAssetError(
            f"{mode.value} 템플릿에 라인 템플릿이 없습니다",
            detail={"expected": line_template},
        )

    doc = _render_lines(mode, names)
    doc.text = text.replace(line_template, doc.text, 1)

    if doc.duplicate_identifiers:
        logger.warning(
            f"duplicate identifiers in {mode.value} output: "
            + ", ".join(doc.duplicate_identifiers)
        )
    return doc
