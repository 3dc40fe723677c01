import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path so aoc_page imports without an install
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

FIXTURES = Path(__file__).resolve().parent / "fixtures"


def build_page(
    parts,
    answers=(),
    banner=None,
    title="Day 1 - Advent of Code 2021",
    extra="",
):
    """Assemble a minimal problem page.

    *parts* holds the inner HTML of each ``<article class="day-desc">``;
    each accepted answer is placed after the matching article.
    """
    body = []
    for i, part in enumerate(parts):
        body.append(f'<article class="day-desc">{part}</article>')
        if i < len(answers):
            body.append(f"<p>Your puzzle answer was <code>{answers[i]}</code>.</p>")
    if banner is not None:
        body.append(f'<p class="day-success">{banner}</p>')
    body.append(extra)
    title_html = f"<title>{title}</title>" if title is not None else ""
    return (
        "<!DOCTYPE html>\n<html lang=\"en-us\"><head><meta charset=\"utf-8\"/>"
        f"{title_html}</head><body><main>{''.join(body)}</main></body></html>"
    )


# Common test fixtures
@pytest.fixture
def fixture_html():
    """Return a loader for the saved pages under tests/fixtures."""
    def load(name: str) -> str:
        return (FIXTURES / name).read_text(encoding="utf-8")
    return load


@pytest.fixture
def page_html():
    """Return the synthetic page builder."""
    return build_page
