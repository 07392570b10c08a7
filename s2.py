"""S2 CLI: rank the sentences of a text file against a query.

Five commands: rank, stats, similarity, info, validate.
Uses typer for argument parsing and rich for formatted terminal output.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from narrowmind.config import ConfigError, load_config, validate_config
from narrowmind.index import CorpusIndex
from narrowmind.searcher import search

app = typer.Typer(help="S2: TF-IDF sentence ranking over a single text.")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log index and cache activity"),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_index(text_path: str) -> CorpusIndex:
    path = Path(text_path)
    if not path.is_file():
        console.print(f"[red]Error: text file not found: {escape(text_path)}[/red]")
        raise typer.Exit(code=1)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        console.print(f"[red]Error: text file is not valid UTF-8: {escape(text_path)}[/red]")
        raise typer.Exit(code=1)
    return CorpusIndex(text)


# ── rank ────────────────────────────────────────────────────────────


@app.command()
def rank(
    text_path: str = typer.Argument(..., help="Path to the text to index"),
    q: str = typer.Option("", "--q", help="Search query string"),
    config_path: str | None = typer.Option(None, "--config", help="Path to config JSON"),
    top: int | None = typer.Option(None, "--top", help="Override ranking.top_n (0 = all)"),
):
    """Rank the sentences of a text by relevance to a query."""
    if not q:
        console.print("[red]Error: --q is required[/red]")
        raise typer.Exit(code=1)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.print(Panel("[bold red]✗ Invalid config[/bold red]", border_style="red"))
        for err in e.errors:
            console.print(f"  [red]✗[/red] {escape(err)}")
        raise typer.Exit(code=1)

    if top is not None:
        config["ranking"]["top_n"] = max(top, 0)

    index = _load_index(text_path)
    results = search(q, config, index)
    precision = config["output"]["precision"]

    console.print(f'\n[bold]Query:[/bold] "{escape(q)}"')
    console.print(
        f"[bold]Config:[/bold] {config['name']} | Top-n: {config['ranking']['top_n'] or 'all'}"
    )
    console.print()

    table = Table()
    table.add_column("#", style="dim", width=3)
    table.add_column("Score", justify="right", width=10)
    table.add_column("Sentence", style="cyan", min_width=30)
    table.add_column("Index", justify="right", width=6)

    for r in results:
        table.add_row(
            str(r.position),
            f"{r.score:.{precision}f}",
            escape(r.preview),
            str(r.sentence_index),
        )

    console.print(table)
    console.print(f"\n{len(results)} of {len(index)} sentences matched")


# ── stats ───────────────────────────────────────────────────────────


@app.command()
def stats(
    text_path: str = typer.Argument(..., help="Path to the text to index"),
    tokens: list[str] = typer.Argument(..., help="Tokens to look up"),
):
    """Show the stem, whole-text TF and corpus IDF of each token."""
    index = _load_index(text_path)

    table = Table(title="Token Statistics")
    table.add_column("Token", style="cyan")
    table.add_column("Stem")
    table.add_column("TF", justify="right")
    table.add_column("IDF", justify="right")

    for token in tokens:
        s = index.get_token_stats(token)
        table.add_row(escape(token), escape(s.token), f"{s.tf:.4f}", f"{s.idf:.4f}")

    console.print(table)


# ── similarity ──────────────────────────────────────────────────────


@app.command()
def similarity(
    text_path: str = typer.Argument(..., help="Path to the text supplying IDF weights"),
    sentence_a: str = typer.Argument(..., help="First sentence"),
    sentence_b: str = typer.Argument(..., help="Second sentence"),
):
    """TF-IDF cosine similarity of two sentences, weighted by the text's IDF."""
    index = _load_index(text_path)
    score = index.similarity(sentence_a, sentence_b)
    color = "green" if score > 0.5 else "yellow" if score > 0 else "red"
    console.print(
        Panel(f"[bold]Similarity:[/bold] [{color}]{score:.4f}[/{color}]", title="TF-IDF cosine")
    )


# ── info ────────────────────────────────────────────────────────────


@app.command()
def info(text_path: str = typer.Argument(..., help="Path to the text to index")):
    """Summarize what the index holds for a text."""
    index = _load_index(text_path)

    table = Table(title="Index Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Sentences", str(len(index.sentences)))
    table.add_row("Tokens", str(len(index.tokens)))
    table.add_row("Distinct stems", str(len(index.vocabulary)))
    console.print(table)


# ── validate ────────────────────────────────────────────────────────


@app.command()
def validate(config_path: str = typer.Argument(..., help="Path to config JSON")):
    """Check a ranking config, with missing keys filled from the defaults."""
    passed, errors = validate_config(config_path)

    if passed:
        console.print(
            Panel("[bold green]✓ Validation passed[/bold green]", border_style="green")
        )
    else:
        console.print(
            Panel("[bold red]✗ Validation failed[/bold red]", border_style="red")
        )
        for err in errors:
            console.print(f"  [red]✗[/red] {escape(err)}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
