"""APA and MLA citation rendering.

Both functions are pure. Author names are used as stored; nothing is abbreviated.
"""

from __future__ import annotations

from academic_engine.models.citation import Citation


def _apa_authors(authors: list[str]) -> str:
    if len(authors) == 1:
        return authors[0]
    if len(authors) == 2:
        return f"{authors[0]} & {authors[1]}"
    return f"{authors[0]} et al."


def surname_first(name: str) -> str:
    """Render `"Given Names Surname"` as `"Surname, Given Names"`.

    A single-token name is taken to be the surname and returned unchanged.
    """

    parts = name.split()
    if len(parts) <= 1:
        return name.strip()
    return f"{parts[-1]}, {' '.join(parts[:-1])}"


def _mla_authors(authors: list[str]) -> str:
    first = surname_first(authors[0])
    if len(authors) == 1:
        return first
    if len(authors) == 2:
        return f"{first}, and {authors[1]}"
    return f"{first}, et al."


def format_apa(citation: Citation) -> str:
    """Render a citation in APA style.

    Example:
        `Jane Doe & John Smith (2020). Title. Journal. Retrieved from https://...`
    """

    text = f"{_apa_authors(citation.authors)} ({citation.year}). {citation.title}. {citation.source}"
    if citation.url:
        text += f". Retrieved from {citation.url}"
    return text


def format_mla(citation: Citation) -> str:
    """Render a citation in MLA style.

    Example:
        `Doe, Jane, and John Smith "Title." Journal, 2020. https://...`
    """

    text = f'{_mla_authors(citation.authors)} "{citation.title}." {citation.source}, {citation.year}'
    if citation.url:
        text += f". {citation.url}"
    return text
