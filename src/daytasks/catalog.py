# src/daytasks/catalog.py

"""
Built-in task catalog.

Two fixed task lists that can be imported into any day. Nothing is parsed at
runtime; the lists are plain data.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CatalogSource:
    key: str
    label: str


_SOURCES: tuple[CatalogSource, ...] = (
    CatalogSource("productivity", "Productivity plan"),
    CatalogSource("streamline", "Streamline plan"),
)

_TASKS: dict[str, tuple[str, ...]] = {
    "productivity": (
        "Study College: Java, PHP, Maths",
        "Complete research paper draft",
        "Complete Week 2 of Classical Mechanics",
        "Prepare quantum computing presentation",
        "Advanced AI/ML course module",
        "Upload content for social media (SciSimplified)",
        "Review research literature",
    ),
    "streamline": (
        "Python For Data Science And AI (IBM skillbuild)",
        "Physics classical mechanics (OCW)",
        "Quantum computing (freecodecamp, Microsoft)",
        "Flutter app development (Simplilearn)",
        "Create blog for NextGenEarning and SkillBridge",
        "Create content for SciSimplified",
        "Study Java from Apna College",
        "Do Elements of AI course",
        "Optimize freelancing profiles",
        "Work on Research Paper",
        "Read 10 pages of Zero to One book",
    ),
}


def list_sources() -> list[CatalogSource]:
    return list(_SOURCES)


def get_tasks(source_key: str, filter_text: str = "") -> list[str]:
    """Tasks of a source, optionally filtered by a case-insensitive substring."""
    tasks = _TASKS.get((source_key or "").strip().lower(), ())
    needle = (filter_text or "").strip().lower()
    if not needle:
        return list(tasks)
    return [t for t in tasks if needle in t.lower()]
