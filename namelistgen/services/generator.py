# namelistgen/services/generator.py
from __future__ import annotations

from loguru import logger

from namelistgen.core.fs import write_document
from namelistgen.schemas.generation import GenerateRequest, GenerationResult
from namelistgen.services.collector import collect_file_names
from namelistgen.services.renderer import load_code_template, render_document


def generate_name_list(request: GenerateRequest, dry_run: bool = False) -> GenerationResult:
    """
    이름 리스트 파일 생성.

    1. 모드별 코드 템플릿 로드 (실패 시 아무 파일도 쓰지 않음)
    2. 검색 폴더에서 파일 이름 수집
    3. 템플릿 치환 후 대상 폴더에 기록 (dry_run 이면 기록 생략)
    """
    template = load_code_template(request.mode, request.template_dir)

    names = collect_file_names(
        request.search_folder,
        include_subfolders=request.include_subfolders,
        ignore_extensions=request.ignore_extensions,
        sort=request.sort_names,
    )

    doc = render_document(
        request.mode,
        template,
        namespace=request.namespace,
        class_name=request.class_name,
        names=names,
    )

    result = GenerationResult(
        output_path=request.output_path,
        mode=request.mode,
        text=doc.text,
        collected=names,
        rendered_count=len(doc.rendered),
        skipped=doc.skipped,
        duplicate_identifiers=doc.duplicate_identifiers,
    )

    if dry_run:
        logger.info(f"dry run: {result.rendered_count} entries, not written")
        return result

    write_document(result.output_path, result.text)
    result.written = True
    logger.info(
        f"generated {result.output_path} "
        f"({request.mode.value}, {result.rendered_count} entries, skipped={len(result.skipped)})"
    )
    return result
