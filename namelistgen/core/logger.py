# namelistgen/core/logger.py
import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None) -> Optional[str]:
    """
    Loguru 로그 설정을 초기화합니다.
    - Console: level 이상 (표준 에러 스트림, 생성 결과를 쓰는 stdout 과 분리)
    - File: DEBUG 이상 (log_file 이 지정된 경우만)
    """
    # 1. 기존 핸들러 제거 (중복 방지)
    logger.remove()

    # 2. 콘솔 출력 설정
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )

    if log_file is None:
        return None

    # 3. 파일 출력 설정
    # - 1 MB 단위 회전, 10일치 보관, zip 압축
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        str(log_file),
        rotation="1 MB",
        retention="10 days",
        compression="zip",
        level="DEBUG",
        encoding="utf-8",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} - {message}",
    )

    return str(log_file)
