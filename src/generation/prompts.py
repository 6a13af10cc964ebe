# src/generation/prompts.py - v1
"""Prompt template for question generation.

Variables:
    {document}: The document text to analyze.
    {numQuestions}: The number of questions to generate.
"""

from __future__ import annotations

PROMPT_TEMPLATE = (
    'Expert Question Generator, style of Gladwell & Pink. Analyze: "{document}", '
    "generate {numQuestions} diverse, comprehensive questions, adjustable complexity, "
    "for students to professionals. Skip with a single \n. No answers."
)


def build_prompt(document: str, num_questions: int, template: str = PROMPT_TEMPLATE) -> str:
    """Substitute the document text and question count into ``template``.

    Plain replacement rather than str.format: documents routinely contain braces.
    """
    return template.replace("{numQuestions}", str(num_questions)).replace(
        "{document}", document
    )
