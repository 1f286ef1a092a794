"""The fixed six-section paper template."""

from __future__ import annotations

from datetime import datetime, timezone

from academic_engine.models.outline import OutlineSection, PaperOutline
from academic_engine.utils.ids import new_id

SECTION_TEMPLATE: tuple[tuple[str, str], ...] = (
    ("Introduction", "Provide background information and state the purpose of the paper."),
    ("Literature Review", "Summarize existing research related to your topic."),
    ("Methodology", "Explain your research methods and approach."),
    ("Results", "Present your findings and data analysis."),
    ("Discussion", "Interpret results and discuss implications."),
    ("Conclusion", "Summarize key findings and suggest future research directions."),
)

SECTION_TITLES: tuple[str, ...] = tuple(title for title, _ in SECTION_TEMPLATE)


def build_template_outline(topic: str, description: str) -> PaperOutline:
    """Fill the template for a topic. Every node gets a fresh id."""

    return PaperOutline(
        id=new_id(),
        title=topic,
        description=description,
        created_at=datetime.now(timezone.utc),
        sections=[
            OutlineSection(id=new_id(), title=title, description=text, subsections=[])
            for title, text in SECTION_TEMPLATE
        ],
    )
