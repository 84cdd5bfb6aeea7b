# namelistgen/core/errors.py
from __future__ import annotations

from typing import Any

from loguru import logger
from pydantic import ValidationError

__all__ = [
    "NameListError",
    "TemplateAssetError",
    "SearchFolderError",
    "DestinationError",
    "report_error",
]

EXIT_GENERATION_ERROR = 1
EXIT_INVALID_INPUT = 2
EXIT_TEMPLATE_NOT_FOUND = 3
EXIT_INVALID_SEARCH_FOLDER = 4
EXIT_DESTINATION_WRITE_FAILED = 5


class NameListError(Exception):
    """생성 과정의 공통 예외. code / message / detail 를 가진다."""

    code = "GENERATION_ERROR"
    exit_code = EXIT_GENERATION_ERROR

    def __init__(self, message: str, *, detail: Any | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_problem(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.detail is not None:
            payload["detail"] = self.detail
        return payload


class TemplateAssetError(NameListError):
    """코드 템플릿 로드 실패 (파일 없음 / 치환 대상 없음)."""

    code = "TEMPLATE_NOT_FOUND"
    exit_code = EXIT_TEMPLATE_NOT_FOUND


class SearchFolderError(NameListError):
    code = "INVALID_SEARCH_FOLDER"
    exit_code = EXIT_INVALID_SEARCH_FOLDER


class DestinationError(NameListError):
    code = "DESTINATION_WRITE_FAILED"
    exit_code = EXIT_DESTINATION_WRITE_FAILED


def _convert_validation_errors(exc: ValidationError) -> list[dict[str, Any]]:
    """pydantic ValidationError → 단순화된 에러 리스트로 변환."""
    return [
        {
            "loc": e.get("loc"),
            "msg": e.get("msg"),
            "type": e.get("type"),
        }
        for e in exc.errors()
    ]


def report_error(exc: Exception) -> int:
    """
    CLI 최상위 에러 처리: 로그를 남기고 종료 코드를 돌려준다.

    - ValidationError: 입력 검증 실패 (2)
    - NameListError: 도메인 에러 (exit_code 속성)
    - 그 외 예외는 호출자에게 그대로 전파한다.
    """
    if isinstance(exc, ValidationError):
        errors = _convert_validation_errors(exc)
        logger.error("INVALID_INPUT: 입력 검증 실패 ({} errors)", len(errors))
        for e in errors:
            logger.error("  {} -> {}", ".".join(str(p) for p in e["loc"] or ()), e["msg"])
        return EXIT_INVALID_INPUT

    if isinstance(exc, NameListError):
        problem = exc.to_problem()
        logger.error("{}: {}", problem["code"], problem["message"])
        if "detail" in problem:
            logger.debug("detail: {}", problem["detail"])
        return exc.exit_code

    raise exc
