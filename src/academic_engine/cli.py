"""CLI entrypoints for the academic content engine."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from academic_engine.config import load_settings
from academic_engine.engine import ContentEngine, build_engine
from academic_engine.errors import EngineError
from academic_engine.logging import configure_logging, get_logger
from academic_engine.models.citation import CitationDraft, CitationStyle

app = typer.Typer(add_completion=False, help="Academic content engine: citations, keywords, coherence, outlines")
cite_app = typer.Typer(add_completion=False, help="Manage citations")
outline_app = typer.Typer(add_completion=False, help="Generate and edit paper outlines")
app.add_typer(cite_app, name="cite")
app.add_typer(outline_app, name="outline")

logger = get_logger(__name__)

_state: dict[str, ContentEngine] = {}


@app.callback()
def main(
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        help="Directory for collection files (overrides ACADEMIC_ENGINE_DATA_DIR)",
    ),
) -> None:
    """Load settings, configure logging and open the engine."""

    settings = load_settings()
    if data_dir is not None:
        settings.data_dir = data_dir
    configure_logging(settings.log_level)
    _state["engine"] = build_engine(settings)


def _engine() -> ContentEngine:
    return _state["engine"]


def _read_text(text: str, file: Optional[Path]) -> str:
    if text:
        return text
    if file is None:
        raise typer.BadParameter("Provide TEXT or --file pointing to a UTF-8 text file.")
    try:
        return file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise typer.BadParameter(f"Cannot read {file}: {e}", param_hint="--file") from e


def _echo_json(payload: object) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def _fail(e: Exception) -> None:
    typer.echo(f"Error: {e}", err=True)
    raise typer.Exit(code=1)


@cite_app.command("add")
def cite_add(
    title: str = typer.Option(..., "--title", help="Work title"),
    authors: list[str] = typer.Option(..., "--author", "-a", help="Author name; repeat for several"),
    year: int = typer.Option(..., "--year"),
    source: str = typer.Option("", "--source", help="Journal, publisher or venue"),
    url: Optional[str] = typer.Option(None, "--url"),
    pdf_id: Optional[str] = typer.Option(None, "--pdf-id", help="Id of a stored PDF"),
) -> None:
    """Add a citation and print it."""

    draft = CitationDraft(title=title, authors=authors, year=year, source=source, url=url, pdf_id=pdf_id)
    try:
        citation = _engine().add_citation(draft)
    except EngineError as e:
        _fail(e)
    _echo_json(citation.to_record())


@cite_app.command("list")
def cite_list(
    style: Optional[CitationStyle] = typer.Option(None, "--style", help="Print formatted references instead of JSON"),
) -> None:
    """List all citations."""

    engine = _engine()
    citations = engine.list_citations()
    if style is None:
        _echo_json([c.to_record() for c in citations])
        return
    for c in citations:
        typer.echo(engine.format_citation(c, style))


@cite_app.command("find")
def cite_find(keywords: list[str] = typer.Argument(..., help="Title keywords")) -> None:
    """Find citations whose title contains any keyword."""

    _echo_json([c.to_record() for c in _engine().find_citations(keywords)])


@cite_app.command("format")
def cite_format(
    citation_id: str = typer.Argument(...),
    style: CitationStyle = typer.Option(CitationStyle.APA, "--style"),
) -> None:
    """Print one citation in APA or MLA style."""

    try:
        typer.echo(_engine().format_citation(citation_id, style))
    except KeyError:
        _fail(LookupError(f"no citation {citation_id}"))


@cite_app.command("delete")
def cite_delete(citation_id: str = typer.Argument(...)) -> None:
    """Delete a citation."""

    try:
        removed = _engine().delete_citation(citation_id)
    except EngineError as e:
        _fail(e)
    typer.echo("deleted" if removed else "not found")


@app.command()
def keywords(
    text: str = typer.Argument("", show_default=False),
    file: Optional[Path] = typer.Option(None, "--file", help="Read text from a file"),
    top_n: Optional[int] = typer.Option(None, "--top-n", min=1),
    optimize: bool = typer.Option(False, "--optimize", help="Add related search phrases"),
) -> None:
    """Extract frequency-ranked keywords."""

    engine = _engine()
    body = _read_text(text, file)
    try:
        results = engine.optimize_keywords(body, top_n) if optimize else engine.extract_keywords(body, top_n)
    except EngineError as e:
        _fail(e)
    _echo_json([r.model_dump() for r in results])


@app.command()
def coherence(
    text: str = typer.Argument("", show_default=False),
    file: Optional[Path] = typer.Option(None, "--file"),
) -> None:
    """Score paragraph coherence."""

    try:
        result = _engine().analyze_paragraph(_read_text(text, file))
    except EngineError as e:
        _fail(e)
    _echo_json({**result.model_dump(), "rating": result.rating, "summary": result.describe()})


@app.command()
def analyze(
    text: str = typer.Argument("", show_default=False),
    file: Optional[Path] = typer.Option(None, "--file"),
) -> None:
    """Analyze a whole document."""

    try:
        result = _engine().analyze_text(_read_text(text, file))
    except EngineError as e:
        _fail(e)
    _echo_json(result.model_dump())


@outline_app.command("generate")
def outline_generate(
    topic: str = typer.Argument(...),
    description: str = typer.Option("", "--description", "-d"),
) -> None:
    """Generate and store a six-section outline."""

    try:
        outline = _engine().generate_outline(topic, description)
    except EngineError as e:
        _fail(e)
    _echo_json(outline.to_record())


@outline_app.command("list")
def outline_list() -> None:
    """List stored outlines (id, title, created)."""

    for o in _engine().list_outlines():
        typer.echo(f"{o.id}\t{o.title}\t{o.created_at.isoformat()}")


@outline_app.command("show")
def outline_show(outline_id: str = typer.Argument(...)) -> None:
    """Print one outline as JSON."""

    outline = _engine().get_outline(outline_id)
    if outline is None:
        _fail(LookupError(f"no outline {outline_id}"))
    _echo_json(outline.to_record())


@outline_app.command("add-section")
def outline_add_section(
    outline_id: str = typer.Argument(...),
    title: str = typer.Argument(...),
    description: str = typer.Option("", "--description", "-d"),
    parent_id: Optional[str] = typer.Option(None, "--parent", help="Add as a subsection of this section"),
) -> None:
    """Append a section (or subsection) to an outline."""

    engine = _engine()
    try:
        if parent_id:
            outline = engine.add_subsection(outline_id, parent_id, title, description)
        else:
            outline = engine.add_section(outline_id, title, description)
    except KeyError as e:
        _fail(LookupError(f"not found: {e.args[0]}"))
    except EngineError as e:
        _fail(e)
    _echo_json(outline.to_record())


@outline_app.command("delete")
def outline_delete(outline_id: str = typer.Argument(...)) -> None:
    """Delete an outline."""

    try:
        removed = _engine().delete_outline(outline_id)
    except EngineError as e:
        _fail(e)
    typer.echo("deleted" if removed else "not found")


if __name__ == "__main__":
    app()
