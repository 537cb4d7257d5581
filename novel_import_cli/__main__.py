"""
novel-import – bulk import of novel folders
 • scan ROOT: discover bundles, parse + validate, optional JSON export
 • normalize FILE: canonicalise one chapter file in place

Each sub-folder of ROOT is one novel, either

    content.txt + cover.jpg                        (single-file layout)
    title.txt blurb.txt category.txt ... chapter_N_Title.txt + cover
                                                   (individual-file layout)
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import List

import jsonschema
import typer
from rich import print
from rich.markup import escape

from manuscript_ingest import logconf
from manuscript_ingest.bundle import discover_bundles
from manuscript_ingest.formatter import normalize_content
from manuscript_ingest.models import IngestResult
from manuscript_ingest.pipeline import ingest_all, to_payload
from novel_import_cli.config import load_settings
from novel_import_cli.utils.validate import validate_payloads

app = typer.Typer(pretty_exceptions_show_locals=False)


# ═════════ report ═════════
def _report(results: List[IngestResult], show_warnings: bool) -> None:
    for r in results:
        novel = r.novel
        if r.validation.valid:
            print(
                f"[green]✔ {escape(r.folder_name)}[/] – {escape(novel.title)} | {escape(novel.genre)} | "
                f"{len(novel.chapters)} chapters | {escape(', '.join(novel.tags)) or 'no tags'}"
            )
        else:
            print(f"[red]❌ {escape(r.folder_name)}[/]")
        for e in r.validation.errors:
            print(f"   [red]• {escape(e)}[/]")
        if show_warnings:
            for w in r.validation.warnings:
                print(f"   [yellow]⚠ {escape(w)}[/]")

    ok = sum(r.validation.valid for r in results)
    print(f"\n[bold]{ok}/{len(results)} bundles ready to upload[/]")


# ═════════ commands ═════════
@app.command()
def scan(
    root: Path = typer.Argument(..., exists=True, file_okay=False, help="folder holding one sub-folder per novel"),
    config: Path | None = typer.Option(None, "--config"),
    batch_size: int | None = typer.Option(None, "--batch-size", min=1),
    export: Path | None = typer.Option(None, "--export", help="write payloads of valid bundles here"),
    log_level: str | None = typer.Option(None, "--log-level"),
    show_warnings: bool = typer.Option(True, "--show-warnings/--no-show-warnings"),
):
    cfg = load_settings(config, batch_size=batch_size, log_level=log_level)
    logconf.init(cfg.log_level, cfg.log_dir)

    bundles = discover_bundles(root)
    if not bundles:
        print(f"[yellow]No novel folders found under {root}[/]")
        raise typer.Exit(1)
    if len(bundles) > cfg.max_novels:
        print(f"[red]At most {cfg.max_novels} novels per run, found {len(bundles)}[/]")
        raise typer.Exit(2)

    results = asyncio.run(ingest_all(bundles, cfg.batch_size))
    _report(results, show_warnings)

    valid = [r for r in results if r.validation.valid]
    if export:
        payloads = [to_payload(r) for r in valid]
        try:
            validate_payloads(payloads)
        except jsonschema.ValidationError as e:
            print(f"[red]❌ Export failed validation:[/]\n{e.message}\n\nPath: {list(e.path)}")
            raise typer.Exit(1)
        export.write_text(
            json.dumps({"novels": payloads}, indent=2, ensure_ascii=False), "utf-8"
        )
        print(f"[green]✔ {len(payloads)} payloads saved to {export}[/]")

    if len(valid) != len(results):
        raise typer.Exit(1)


@app.command()
def normalize(file: Path = typer.Argument(..., exists=True, dir_okay=False)):
    file.write_text(normalize_content(file.read_text("utf-8")) + "\n", "utf-8")
    print(f"[green]✓ normalised {file}[/]")


if __name__ == "__main__":
    app()
