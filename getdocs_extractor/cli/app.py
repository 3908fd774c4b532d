"""
CLI 入口模块 - 使用 Typer 构建命令行界面

提取流程：
1. 读取源文件
2. 提取注释中的声明
3. 生成报告
"""

import logging
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.markup import escape

from getdocs_extractor.core import extract
from getdocs_extractor.errors import ExtractError
from getdocs_extractor.reporters import FileDeclarations, JsonReporter, RichReporter
from getdocs_extractor.source import ParseConfig

# 创建 Typer 应用实例
app = typer.Typer(
    name="getdocs-extract",
    help="Extract API declarations from getdocs-style JavaScript comments.",
    add_completion=False,
)

# Rich Console 用于输出
console = Console()

SOURCE_TYPES = ("module", "script")
FORMATS = ("rich", "json")


@app.command("extract")
def extract_files(
    paths: List[str] = typer.Argument(
        ...,
        help="JavaScript source files to extract declarations from",
    ),
    format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default) or json",
    ),
    source_type: str = typer.Option(
        "module",
        "--source-type",
        "-s",
        help="Parse sources as an ES module (default) or a script",
    ),
    tolerant: bool = typer.Option(
        False,
        "--tolerant",
        help="Tolerate recoverable syntax errors",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
) -> None:
    """
    Extract declarations from source files.

    Examples:
        getdocs-extract extract src/model.js
        getdocs-extract extract src/*.js --format json
        getdocs-extract extract legacy.js --source-type script
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if format not in FORMATS:
        console.print(f"[red]Error:[/red] Unknown format: {escape(format)}")
        raise typer.Exit(2)

    if source_type not in SOURCE_TYPES:
        console.print(f"[red]Error:[/red] Unknown source type: {escape(source_type)}")
        raise typer.Exit(2)

    config = ParseConfig(source_type=source_type, tolerant=tolerant)
    results: list[FileDeclarations] = []
    failed = 0

    for target in paths:
        path = Path(target)
        if not path.is_file():
            console.print(f"[red]Error:[/red] File does not exist: {escape(target)}")
            failed += 1
            continue

        if verbose:
            console.print(f"[dim]Extracting {escape(target)}[/dim]")

        try:
            source = path.read_text(encoding="utf-8")
            declarations = extract(source, config)
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]Error:[/red] Failed to read {escape(target)}: {escape(str(e))}")
            failed += 1
            continue
        except ExtractError as e:
            console.print(f"[red]Error:[/red] {escape(target)}: {escape(str(e))}")
            failed += 1
            continue

        results.append(FileDeclarations(path=target, declarations=declarations))

    if format == "json":
        reporter = JsonReporter()
    else:
        reporter = RichReporter(console)

    reporter.report(results)

    if failed:
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of getdocs-extractor."""
    from getdocs_extractor import __version__
    console.print(f"[bold]getdocs-extractor[/bold] v{__version__}")


if __name__ == "__main__":
    app()
