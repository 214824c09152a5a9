"""Shared pytest fixtures for the full cutr test suite."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_delimiter_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's `CUTR_DELIMITER` from leaking into tests."""

    monkeypatch.delenv("CUTR_DELIMITER", raising=False)


@pytest.fixture
def books_tsv_path(tmp_path: Path) -> Path:
    """Write a small tab-delimited fixture with author, year, and title columns."""

    path = tmp_path / "books.tsv"
    path.write_text(
        "Author\tYear\tTitle\n"
        "Émile Zola\t1865\tLa Confession de Claude\n"
        "Samuel Beckett\t1952\tWaiting for Godot\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def books_csv_path(tmp_path: Path) -> Path:
    """Write a small comma-delimited fixture with one quoted field."""

    path = tmp_path / "books.csv"
    path.write_text(
        "Author,Year,Title\n"
        'Jules Verne,1870,"Twenty Thousand Leagues, Under the Sea"\n',
        encoding="utf-8",
    )
    return path
