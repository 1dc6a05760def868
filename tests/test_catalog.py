# tests/test_catalog.py

from __future__ import annotations

from daytasks import catalog


def test_two_fixed_sources() -> None:
    sources = catalog.list_sources()
    assert [s.key for s in sources] == ["productivity", "streamline"]
    assert all(s.label for s in sources)


def test_get_tasks_full_list_and_filter() -> None:
    assert len(catalog.get_tasks("productivity")) == 7
    assert len(catalog.get_tasks("streamline")) == 11
    assert catalog.get_tasks("streamline", "JAVA") == ["Study Java from Apna College"]
    assert catalog.get_tasks("productivity", "  research ") == [
        "Complete research paper draft",
        "Review research literature",
    ]


def test_unknown_source_and_no_match() -> None:
    assert catalog.get_tasks("nope") == []
    assert catalog.get_tasks("productivity", "zzz") == []


def test_returned_list_is_a_copy() -> None:
    tasks = catalog.get_tasks("productivity")
    tasks.clear()
    assert catalog.get_tasks("productivity")
