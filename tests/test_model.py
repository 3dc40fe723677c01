"""
Tests for aoc_page.model extraction

Test Coverage:
- infer_stage(): agreement, abstention, disagreement
- extract_test_cases(): shapes per stage and the example heuristics
- extract_answers(): answer shapes and missing answers
- AocPage / is_unreleased()
"""
import logging

import pytest

import aoc_page.model.stage as stage_module
from aoc_page.errors import AmbiguousStage, MissingExpectedAnswer
from aoc_page.layout import load_page
from aoc_page.model import (
    AocPage,
    ProblemStage,
    ProblemStageWithAnswers,
    TestCase,
    TestCases,
    collect_votes,
    extract_answers,
    extract_test_cases,
    infer_stage,
    is_unreleased,
)

DAY2_EXAMPLE = "forward 5\ndown 5\nforward 8\nup 3\ndown 8\nforward 2\n"
ELVES_EXAMPLE = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"

FIRST_HALF = "The first half of this puzzle is complete! It provides one gold star: *"
BOTH_PARTS = "Both parts of this puzzle are complete! They provide two gold stars: **"


# ---------------------------------------------------------------------------
# Stage inference
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name, expected", [
    ("part1_2015_day10.html", ProblemStage.PART1),
    ("part1_2018_day11.html", ProblemStage.PART1),
    ("part2_2019_day1.html", ProblemStage.PART2),
    ("complete_2021_day2.html", ProblemStage.COMPLETE),
    ("complete_2022_day1.html", ProblemStage.COMPLETE),
])
def test_infer_stage_fixtures(fixture_html, name, expected):
    assert infer_stage(load_page(fixture_html(name))) is expected


def test_votes_on_part2_page(fixture_html):
    votes = collect_votes(load_page(fixture_html("part2_2019_day1.html")))
    assert votes == {
        "success_banner": ProblemStage.PART2,
        "revealed_answers": ProblemStage.PART2,
        "anchors": None,
    }


def test_unknown_banner_abstains(page_html, caplog):
    page = load_page(page_html(["<p>one</p>"], banner="You got a rock!"))
    with caplog.at_level(logging.ERROR):
        assert infer_stage(page) is ProblemStage.PART1
    assert collect_votes(page)["success_banner"] is None
    assert "unknown day success string" in caplog.text


def test_disagreeing_signals_raise(page_html):
    page = load_page(page_html(["<p>one</p>"], answers=["1"], banner=BOTH_PARTS))
    with pytest.raises(AmbiguousStage) as exc_info:
        infer_stage(page)
    err = exc_info.value
    assert err.votes == {
        "success_banner": ProblemStage.COMPLETE,
        "revealed_answers": ProblemStage.PART2,
        "anchors": ProblemStage.PART1,
    }
    assert err.tally == {
        ProblemStage.PART1: 1,
        ProblemStage.PART2: 1,
        ProblemStage.COMPLETE: 1,
    }
    assert "multiple winners" in str(err)


def test_all_abstaining_signals_raise(page_html, monkeypatch):
    monkeypatch.setattr(stage_module, "SIGNALS", (("silent", lambda page: None),))
    page = load_page(page_html(["<p>one</p>"]))
    with pytest.raises(AmbiguousStage, match="no votes cast"):
        infer_stage(page)


def test_stage_rank_orders_lattice():
    ranks = [stage.rank for stage in ProblemStage]
    assert ranks == [0, 1, 2]


# ---------------------------------------------------------------------------
# Test cases
# ---------------------------------------------------------------------------

def test_complete_page_test_cases(fixture_html):
    cases = extract_test_cases(load_page(fixture_html("complete_2021_day2.html")))
    assert cases == TestCases(
        part1=TestCase(input=DAY2_EXAMPLE, output="150"),
        part2=TestCase(input=DAY2_EXAMPLE, output="900"),
    )
    assert cases.has_all()


def test_part1_page_without_answer(page_html):
    html = page_html(["<pre><code>a\nb\n</code></pre><p>What is <em>the answer</em>?</p>"])
    cases = extract_test_cases(load_page(html))
    assert cases == TestCases(part1=TestCase(input="a\nb\n", output=None))
    assert not cases.has_part2
    assert not cases.has_none()
    assert not cases.has_all()


def test_em_code_answers_follow_code_em(fixture_html):
    cases = extract_test_cases(load_page(fixture_html("complete_2022_day1.html")))
    assert cases.part1 == TestCase(input=ELVES_EXAMPLE, output="24000")
    assert cases.part2 == TestCase(input=ELVES_EXAMPLE, output="45000")


def test_last_emphasis_can_be_the_question(fixture_html):
    # 2018 day 11 ends part 1 with the question itself, not a worked answer.
    cases = extract_test_cases(load_page(fixture_html("part1_2018_day11.html")))
    assert cases.part1.input.startswith("-2  -4   4   4   4\n")
    assert cases.part1.output == "X,Y"
    assert cases.part2 is None


def test_part2_shape_without_examples(fixture_html):
    cases = extract_test_cases(load_page(fixture_html("part2_2019_day1.html")))
    assert cases.has_part2
    assert cases.has_none()
    assert cases.part2 == TestCase()


def test_page_without_examples(fixture_html):
    cases = extract_test_cases(load_page(fixture_html("part1_2015_day10.html")))
    assert cases == TestCases(part1=TestCase())
    assert cases.has_none()


def test_shape_follows_explicit_stage(fixture_html):
    page = load_page(fixture_html("complete_2021_day2.html"))
    cases = extract_test_cases(page, ProblemStage.PART1)
    assert cases == TestCases(part1=TestCase(input=DAY2_EXAMPLE, output="150"))


def test_test_case_flags():
    assert TestCase().has_none()
    assert not TestCase(output="1").has_none()
    assert not TestCase(input="1").has_none()
    assert TestCase("1", "2").has_all()
    assert not TestCase(input="1").has_all()

    cases = TestCases(part1=TestCase("1", "2"), part2=TestCase("1", None))
    assert cases.has_all_part1()
    assert not cases.has_all_part2()
    assert not cases.has_all()


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name, expected", [
    ("part1_2015_day10.html", ProblemStageWithAnswers.part1()),
    ("part2_2019_day1.html", ProblemStageWithAnswers.part2("3412531")),
    ("complete_2021_day2.html", ProblemStageWithAnswers.complete("2039912", "1942068080")),
    ("complete_2022_day1.html", ProblemStageWithAnswers.complete("71502", "208191")),
])
def test_extract_answers_fixtures(fixture_html, name, expected):
    assert extract_answers(load_page(fixture_html(name))) == expected


def test_missing_expected_answer(fixture_html):
    page = load_page(fixture_html("part2_2019_day1.html"))
    with pytest.raises(MissingExpectedAnswer) as exc_info:
        extract_answers(page, ProblemStage.COMPLETE)
    err = exc_info.value
    assert err.stage is ProblemStage.COMPLETE
    assert err.part == 2
    assert err.found == 1


@pytest.mark.parametrize("kwargs", [
    {"stage": ProblemStage.PART1, "part1_answer": "1"},
    {"stage": ProblemStage.PART2},
    {"stage": ProblemStage.PART2, "part1_answer": "1", "part2_answer": "2"},
    {"stage": ProblemStage.COMPLETE, "part1_answer": "1"},
    {"stage": ProblemStage.COMPLETE, "part1_answer": "1", "part2_answer": "2",
     "part1_incorrect_guesses": ["0"]},
])
def test_answer_shape_must_fit_stage(kwargs):
    with pytest.raises(ValueError):
        ProblemStageWithAnswers(**kwargs)


# ---------------------------------------------------------------------------
# AocPage
# ---------------------------------------------------------------------------

def test_aoc_page_from_html(fixture_html):
    page = AocPage.from_html(fixture_html("part1_2015_day10.html"))
    assert page.stage is ProblemStage.PART1
    assert repr(page) == "<AocPage POST_2015 stage=part1>"
    assert page.embedded_puzzle_input() == "1321131112"
    assert page.answers() == ProblemStageWithAnswers.part1()
    assert page.test_cases().has_none()


def test_aoc_page_complete(fixture_html):
    page = AocPage.from_html(fixture_html("complete_2021_day2.html"))
    assert page.stage is ProblemStage.COMPLETE
    assert page.answers().part2_answer == "1942068080"
    assert page.test_cases().part2.output == "900"
    assert page.embedded_puzzle_input() is None


def test_is_unreleased(fixture_html):
    placeholder = (
        "<p>Please don't repeatedly request this endpoint before it unlocks! "
        "The calendar countdown is synchronized with the server time; "
        "the link will be enabled on the calendar the instant this puzzle becomes available.</p>"
    )
    assert is_unreleased(placeholder)
    assert not is_unreleased(fixture_html("complete_2021_day2.html"))
