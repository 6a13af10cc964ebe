# src/generation/batch_runner.py - v1
"""Concurrent per-document question generation with incremental persistence.

One task per document is launched at once; an optional semaphore bounds
how many completion calls are in flight. Each finished document is
stored in its own slot (input order, not completion order) and the
whole results file is rewritten. A failing document leaves its slot
empty and never cancels the others. A failed results write marks that
document failed and is recorded on the BatchResult.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import time

from questgen.core.models import BatchResult, Document, DocumentOutcome
from questgen.generation.prompts import build_prompt
from questgen.generation.question_parser import parse_questions
from questgen.llm.base_client import BaseLLMClient
from questgen.llm.errors import CompletionError
from questgen.logging.context import set_document_context, set_phase
from questgen.storage.results_file import ResultsFile

logger = logging.getLogger(__name__)


class BatchRunner:
    """Generate questions for a document set and persist them as they complete.

    Args:
        client: Completion client shared by all tasks.
        results_file: Destination for the incremental JSON snapshot.
        concurrency: Max simultaneous completion calls (0 = unbounded).
        max_tokens: Per-completion token limit passed to the client.
    """

    def __init__(
        self,
        client: BaseLLMClient,
        results_file: ResultsFile,
        concurrency: int = 8,
        max_tokens: int | None = None,
    ) -> None:
        if concurrency < 0:
            raise ValueError("concurrency must be >= 0")
        self._client = client
        self._results = results_file
        self._concurrency = concurrency
        self._max_tokens = max_tokens
        self._output_error: str | None = None

    async def run(
        self, documents: list[Document], questions_per_document: int,
    ) -> BatchResult:
        """Generate questions for every document.

        Returns:
            BatchResult with per-document outcomes in input order.

        Raises:
            OSError: If the initial results file cannot be written.
        """
        t0 = time.perf_counter()
        total = len(documents)
        self._output_error = None
        await self._results.initialize(total)

        semaphore = asyncio.Semaphore(self._concurrency) if self._concurrency else None
        tasks = [
            asyncio.create_task(
                self._generate(index, doc, total, questions_per_document, semaphore)
            )
            for index, doc in enumerate(documents)
        ]
        outcomes = list(await asyncio.gather(*tasks)) if tasks else []

        succeeded = sum(1 for o in outcomes if o.succeeded)
        total_questions = sum(len(o.questions) for o in outcomes if o.succeeded)
        return BatchResult(
            total_documents=total,
            succeeded=succeeded,
            failed=total - succeeded,
            total_questions=total_questions,
            output_path=str(self._results.path),
            duration_seconds=round(time.perf_counter() - t0, 2),
            outcomes=outcomes,
            output_error=self._output_error,
        )

    async def _generate(
        self,
        index: int,
        document: Document,
        total: int,
        questions_per_document: int,
        semaphore: asyncio.Semaphore | None,
    ) -> DocumentOutcome:
        set_phase("generation")
        set_document_context(index, document.source or None)
        outcome = DocumentOutcome(index=index, source=document.source)

        try:
            async with semaphore or contextlib.nullcontext():
                logger.info("[%d/%d] Generating questions", index + 1, total)
                prompt = build_prompt(document.content, questions_per_document)
                response = await self._client.complete(prompt, max_tokens=self._max_tokens)
        except CompletionError as e:
            outcome.error = f"{type(e).__name__}: {e}"
            logger.warning("[%d/%d] Generation failed: %s", index + 1, total, outcome.error)
            return outcome
        except Exception as e:
            outcome.error = f"{type(e).__name__}: {e}"
            logger.exception("[%d/%d] Unexpected generation failure", index + 1, total)
            return outcome

        questions = parse_questions(response.content)
        try:
            await self._results.set(index, questions)
        except OSError as e:
            outcome.error = f"{type(e).__name__}: {e}"
            if self._output_error is None:
                self._output_error = outcome.error
            logger.error(
                "[%d/%d] Failed to write results to %s: %s",
                index + 1, total, self._results.path, e,
            )
            return outcome

        outcome.questions = questions
        logger.info(
            "[%d/%d] Generated %d questions (%s, %d output tokens, %dms)",
            index + 1, total, len(questions),
            response.model, response.output_tokens, response.latency_ms,
        )
        return outcome
