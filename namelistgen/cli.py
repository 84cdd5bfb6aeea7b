# namelistgen/cli.py

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from namelistgen.core.config import get_settings
from namelistgen.core.errors import NameListError, report_error
from namelistgen.core.logger import setup_logging
from namelistgen.schemas.common import OutputMode
from namelistgen.schemas.generation import GenerateRequest
from namelistgen.services.collector import collect_file_names
from namelistgen.services.generator import generate_name_list
from namelistgen.services.renderer import TEMPLATE_ASSETS, template_asset_path

app = typer.Typer(help="Generate a name list source file from a folder of assets.")


def _init_logging(verbose: bool) -> None:
    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.LOG_LEVEL, settings.log_file_path)


@app.command("generate")
def generate(
    search_folder: Path = typer.Argument(..., help="Folder to scan."),
    destination_folder: Path = typer.Argument(..., help="Folder the generated file is written to."),
    mode: Optional[OutputMode] = typer.Option(None, "--mode", "-m", case_sensitive=False),
    namespace: Optional[str] = typer.Option(None, "--namespace", "-n"),
    class_name: Optional[str] = typer.Option(None, "--class-name", "-c"),
    output_file_name: Optional[str] = typer.Option(
        None, "--output-file-name", "-o", help="File name without extension."
    ),
    recursive: Optional[bool] = typer.Option(
        None, "--recursive/--no-recursive", help="Include subfolders (default: settings)."
    ),
    ignore_ext: Optional[List[str]] = typer.Option(
        None, "--ignore-ext", help="Extension to skip (repeatable, replaces the default list)."
    ),
    source_ext: Optional[str] = typer.Option(None, "--source-ext"),
    template_dir: Optional[Path] = typer.Option(None, "--template-dir"),
    sort: bool = typer.Option(False, "--sort", help="Sort names by relative path."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the result instead of writing it."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    _init_logging(verbose)
    try:
        request = GenerateRequest.from_settings(
            get_settings(),
            search_folder=search_folder,
            destination_folder=destination_folder,
            mode=mode,
            namespace=namespace,
            class_name=class_name,
            output_file_name=output_file_name,
            include_subfolders=recursive,
            ignore_extensions=ignore_ext or None,
            source_extension=source_ext,
            template_dir=template_dir,
            sort_names=sort or None,
        )
        result = generate_name_list(request, dry_run=dry_run)
    except (ValidationError, NameListError) as exc:
        raise typer.Exit(code=report_error(exc))

    if dry_run:
        typer.echo(result.text)
    else:
        typer.echo(str(result.output_path))


@app.command("collect")
def collect(
    search_folder: Path = typer.Argument(..., help="Folder to scan."),
    recursive: Optional[bool] = typer.Option(
        None, "--recursive/--no-recursive", help="Include subfolders (default: settings)."
    ),
    ignore_ext: Optional[List[str]] = typer.Option(None, "--ignore-ext"),
    sort: bool = typer.Option(False, "--sort", help="Sort names by relative path."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    _init_logging(verbose)
    settings = get_settings()
    try:
        names = collect_file_names(
            search_folder,
            include_subfolders=settings.INCLUDE_SUBFOLDERS if recursive is None else recursive,
            ignore_extensions=ignore_ext or settings.IGNORE_EXTENSIONS,
            sort=settings.SORT_NAMES or sort,
        )
    except NameListError as exc:
        raise typer.Exit(code=report_error(exc))

    for name in names:
        typer.echo(name)


@app.command("templates")
def templates(template_dir: Optional[Path] = typer.Option(None, "--template-dir")):
    folder = template_dir or get_settings().template_dir_path
    for mode in TEMPLATE_ASSETS:
        path = template_asset_path(mode, folder)
        state = "ok" if path.is_file() else "missing"
        typer.echo(f"{mode.value}\t{path}\t{state}")


if __name__ == "__main__":
    app()
