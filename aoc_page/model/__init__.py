"""Problem stage inference, test case and answer extraction, and record merging."""

from __future__ import annotations

from aoc_page.model.answers import ProblemStageWithAnswers, extract_answers
from aoc_page.model.page import AocPage, is_unreleased
from aoc_page.model.record import DayRecord
from aoc_page.model.stage import ProblemStage, Vote, collect_votes, infer_stage
from aoc_page.model.test_cases import TestCase, TestCases, extract_test_cases

__all__ = [
    "AocPage",
    "DayRecord",
    "ProblemStage",
    "ProblemStageWithAnswers",
    "TestCase",
    "TestCases",
    "Vote",
    "collect_votes",
    "extract_answers",
    "extract_test_cases",
    "infer_stage",
    "is_unreleased",
]
