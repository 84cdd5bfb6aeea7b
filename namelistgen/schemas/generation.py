# namelistgen/schemas/generation.py
# =============================================================================
# 생성 요청 / 결과
#
# - GenerateRequest: 1회 생성 설정 (Settings + CLI 값)
# - 명시적 None 값은 버려서 Settings 기본값이 적용되도록 한다.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from pydantic import Field, field_validator

from namelistgen.core.fs import destination_path

from .common import AppBaseModel, OutputMode

if TYPE_CHECKING:
    from namelistgen.core.config import Settings


def _drop_none(obj: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in obj.items() if v is not None}


class GenerateRequest(AppBaseModel):
    search_folder: Path
    destination_folder: Path
    mode: OutputMode = OutputMode.FIELDS

    namespace: str = Field("GenerateFileList", min_length=1)
    class_name: str = Field("FileNames", min_length=1)
    output_file_name: str = Field("FileNameList", min_length=1)

    include_subfolders: bool = True
    ignore_extensions: List[str] = Field(
        default_factory=lambda: [".meta", ".txt", ".DS_Store", ".cs"]
    )
    source_extension: str = ".cs"
    template_dir: Optional[Path] = None  # None 이면 번들 템플릿
    sort_names: bool = False

    @field_validator("namespace", "class_name", "output_file_name", mode="before")
    @classmethod
    def _strip(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("output_file_name")
    @classmethod
    def _plain_file_name(cls, v: str) -> str:
        if "/" in v or "\\" in v:
            raise ValueError("output_file_name must be a bare file name (no path separators)")
        return v

    @field_validator("source_extension")
    @classmethod
    def _dot_prefixed(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("source_extension must not be empty")
        return v if v.startswith(".") else f".{v}"

    @property
    def output_path(self) -> Path:
        return destination_path(self.destination_folder, self.output_file_name, self.source_extension)

    @classmethod
    def from_settings(cls, settings: "Settings", **overrides: Any) -> "GenerateRequest":
        """Settings 기본값 위에 CLI 값을 덮어써서 요청을 만든다 (None 은 무시)."""
        data: Dict[str, Any] = {
            "mode": settings.OUTPUT_MODE,
            "namespace": settings.NAMESPACE,
            "class_name": settings.CLASS_NAME,
            "output_file_name": settings.OUTPUT_FILE_NAME,
            "include_subfolders": settings.INCLUDE_SUBFOLDERS,
            "ignore_extensions": list(settings.IGNORE_EXTENSIONS),
            "source_extension": settings.SOURCE_EXTENSION,
            "template_dir": settings.template_dir_path,
            "sort_names": settings.SORT_NAMES,
        }
        data.update(_drop_none(overrides))
        return cls(**data)


@dataclass
class GenerationResult:
    output_path: Path
    mode: OutputMode
    text: str
    collected: List[str] = field(default_factory=list)
    rendered_count: int = 0
    skipped: List[str] = field(default_factory=list)
    duplicate_identifiers: List[str] = field(default_factory=list)
    written: bool = False
