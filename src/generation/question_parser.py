# src/generation/question_parser.py - v1
"""Turn raw completion text into a list of question strings."""

from __future__ import annotations

import re

_BLANK_LINES = re.compile(r"\n{2,}")
_ENUMERATION = re.compile(r"^[0-9]+\.\s+")


def parse_questions(raw: str) -> list[str]:
    """Split a completion into questions, one per non-empty line.

    Leading ``<digits>.`` markers are removed. Order is kept and nothing is
    deduplicated; the requested question count is advisory only.
    """
    questions: list[str] = []
    for segment in raw.split("\n"):
        question = segment.strip()
        question = _BLANK_LINES.sub("\n", question)
        question = _ENUMERATION.sub("", question)
        if question:
            questions.append(question)
    return questions
