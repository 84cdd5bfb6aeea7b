# namelistgen/core/config.py
from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from namelistgen.schemas.common import OutputMode

# 번들 템플릿 위치 (namelistgen/templates)
BUNDLED_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

DEFAULT_IGNORE_EXTENSIONS = [".meta", ".txt", ".DS_Store", ".cs"]


class Settings(BaseSettings):
    """생성기 기본 설정 (환경변수 / .env)."""

    model_config = SettingsConfigDict(
        env_prefix="NAMELIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =========================================================
    # 1. 생성 파일 기본값
    # =========================================================
    OUTPUT_FILE_NAME: str = Field(
        default="FileNameList", description="생성 파일 이름 (확장자 없음)"
    )
    NAMESPACE: str = Field(
        default="GenerateFileList", description="#NAMESPACE# 치환 값"
    )
    CLASS_NAME: str = Field(default="FileNames", description="#CLASSNAME# 치환 값")
    OUTPUT_MODE: OutputMode = Field(
        default=OutputMode.FIELDS, description="생성 타입 (Fields / Dictionary)"
    )
    SOURCE_EXTENSION: str = Field(
        default=".cs", description="생성 파일 확장자 (점 포함)"
    )

    # =========================================================
    # 2. 검색 옵션
    # =========================================================
    INCLUDE_SUBFOLDERS: bool = Field(default=True, description="하위 폴더 포함 여부")
    IGNORE_EXTENSIONS: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_IGNORE_EXTENSIONS),
        description="무시할 확장자 목록 (콤마 구분 또는 JSON 리스트)",
    )
    SORT_NAMES: bool = Field(
        default=False, description="수집 결과를 상대 경로 기준으로 정렬"
    )

    @field_validator("IGNORE_EXTENSIONS", mode="before")
    @classmethod
    def assemble_ignore_extensions(cls, v: Union[str, List[str]]) -> List[str]:
        """문자열로 들어온 확장자 설정을 리스트로 변환"""
        if isinstance(v, str):
            if v.strip().startswith("["):
                return json.loads(v)
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, tuple, set)):
            return list(v)
        raise ValueError(v)

    # =========================================================
    # 3. 템플릿 / 로그
    # =========================================================
    TEMPLATE_DIR: Optional[str] = Field(
        default=None, description="템플릿 디렉터리 (없으면 번들 템플릿 사용)"
    )
    LOG_LEVEL: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="콘솔 로그 레벨"
    )
    LOG_FILE: Optional[str] = Field(
        default=None, description="파일 로그 경로 (없으면 콘솔만)"
    )

    @property
    def template_dir_path(self) -> Path:
        """템플릿 디렉터리 절대 경로 (Path 객체)."""
        if self.TEMPLATE_DIR:
            return Path(self.TEMPLATE_DIR).resolve()
        return BUNDLED_TEMPLATE_DIR

    @property
    def log_file_path(self) -> Optional[Path]:
        return Path(self.LOG_FILE).resolve() if self.LOG_FILE else None


@lru_cache
def get_settings() -> Settings:
    """싱글톤 Settings 인스턴스."""
    return Settings()
