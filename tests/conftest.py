# tests/conftest.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict

import pytest
from loguru import logger

from namelistgen.core.config import BUNDLED_TEMPLATE_DIR, get_settings
from namelistgen.schemas.generation import GenerateRequest


def _touch(root: Path, files: Dict[str, str]) -> None:
    for rel, body in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(body, encoding="utf-8")


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """
    - NAMELIST_* 환경변수 / .env 영향 제거
    - get_settings 캐시 초기화
    - 테스트 후 loguru 핸들러 정리 (CliRunner 가 닫은 stderr 참조 방지)
    """
    for key in list(os.environ):
        if key.startswith("NAMELIST_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logger.remove()


@pytest.fixture()
def search_folder(tmp_path: Path) -> Path:
    """foo.png / bar.meta / baz bar.png 가 들어있는 검색 폴더."""
    root = tmp_path / "Assets" / "Sounds"
    root.mkdir(parents=True)
    _touch(root, {"foo.png": "x", "bar.meta": "x", "baz bar.png": "x"})
    return root


@pytest.fixture()
def nested_folder(tmp_path: Path) -> Path:
    root = tmp_path / "Assets" / "Resources"
    root.mkdir(parents=True)
    _touch(
        root,
        {
            "title.png": "x",
            "title.png.meta": "x",
            "notes.txt": "x",
            "Player.cs": "x",
            ".DS_Store": "x",
            "bgm/main theme.ogg": "x",
            "bgm/main theme.ogg.meta": "x",
            "se/click.wav": "x",
            "se/deep/hit.WAV": "x",
        },
    )
    return root


@pytest.fixture()
def destination(tmp_path: Path) -> Path:
    out = tmp_path / "Generated"
    out.mkdir()
    return out


@pytest.fixture()
def make_request(search_folder: Path, destination: Path):
    def _make(**overrides) -> GenerateRequest:
        data = dict(
            search_folder=search_folder,
            destination_folder=destination,
            template_dir=BUNDLED_TEMPLATE_DIR,
        )
        data.update(overrides)
        return GenerateRequest(**data)

    return _make
