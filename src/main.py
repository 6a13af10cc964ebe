# src/main.py - v1
"""CLI entry point.

Usage:
    questgen quest-gen [-d DIR] [-o FILE] [-k KEY] [-m MODEL] [-q N] [options]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from questgen.config.settings import ConfigurationError, Settings, load_settings
from questgen.core.models import BatchResult
from questgen.logging.logger import setup_logging
from questgen.version import __version__

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 3
EXIT_INTERRUPTED = 130


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging(level="DEBUG" if args.verbose else "INFO")

    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_FATAL

    try:
        return asyncio.run(args.func(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_INTERRUPTED
    except ConfigurationError as exc:
        logger.error("%s See --help for more information.", exc)
        return EXIT_FATAL
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return EXIT_FATAL


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="questgen",
        description=f"questgen v{__version__} - study question generator for document folders",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    p_gen = subparsers.add_parser(
        "quest-gen", help="Generate questions for every document in a directory",
    )
    p_gen.add_argument(
        "-d", "--directory", type=Path, default=None,
        help="Directory where the documents to be processed are located (default: ./data)",
    )
    p_gen.add_argument(
        "-o", "--output", type=Path, default=None,
        help="File path where the generated questions are written (default: ./questions.json)",
    )
    p_gen.add_argument(
        "-k", "--key", default=None,
        help="OpenAI API key (default: OPENAI_API_KEY environment variable)",
    )
    p_gen.add_argument(
        "-m", "--model", default=None,
        help="OpenAI model (default: OPENAI_MODEL environment variable or gpt-3.5-turbo)",
    )
    p_gen.add_argument(
        "-q", "--questions", type=int, default=None,
        help="Number of questions to generate per document (default: 25)",
    )
    p_gen.add_argument(
        "-t", "--tokens", type=int, default=None,
        help="Maximum number of tokens to generate per completion",
    )
    p_gen.add_argument(
        "-j", "--concurrency", type=int, default=None,
        help="Maximum simultaneous completion requests, 0 for unbounded (default: 8)",
    )
    p_gen.add_argument(
        "-c", "--no-cache", action="store_true",
        help="Disable the document cache: documents are reloaded and pre-processed on every run",
    )
    p_gen.add_argument(
        "-s", "--stream", action="store_true",
        help="Stream questions as they are generated. This feature is not yet supported.",
    )
    p_gen.set_defaults(func=_cmd_quest_gen)

    return parser


async def _cmd_quest_gen(args: argparse.Namespace) -> int:
    """Execute question generation for a directory."""
    from questgen.cache.cache_factory import create_cache_store
    from questgen.extraction.directory_loader import DirectoryLoader
    from questgen.generation.batch_runner import BatchRunner
    from questgen.ingestion.pipeline import IngestionPipeline
    from questgen.llm.client_factory import create_llm_client
    from questgen.storage.results_file import ResultsFile

    if args.stream:
        logger.error("Streaming is not yet supported, please disable the --stream option.")
        return EXIT_FATAL

    settings = load_settings(
        openai_api_key=args.key,
        openai_model=args.model,
        questions_per_document=args.questions,
        max_tokens=args.tokens,
        generation_concurrency=args.concurrency,
        data_directory=args.directory,
        output_path=args.output,
        cache_enabled=False if args.no_cache else None,
    )
    _configure_logging(settings, args.verbose)

    client = create_llm_client(settings)

    directory = settings.data_directory
    if not directory.is_dir():
        logger.error("Not a directory: %s", directory)
        return EXIT_FATAL

    pipeline = IngestionPipeline(
        DirectoryLoader(directory), cache_store=create_cache_store(settings),
    )
    documents = await pipeline.ingest(directory)
    logger.info(
        "Ingested %d documents from %s (%s)",
        len(documents), directory,
        "cached" if pipeline.cache_hit else "loaded",
    )

    runner = BatchRunner(
        client,
        ResultsFile(settings.output_path),
        concurrency=settings.generation_concurrency,
        max_tokens=settings.max_tokens,
    )
    result = await runner.run(documents, settings.questions_per_document)

    _print_result_summary(result)
    if result.output_failed:
        return EXIT_FATAL
    return EXIT_PARTIAL_FAILURE if result.has_failures else EXIT_OK


def _configure_logging(settings: Settings, verbose: bool) -> None:
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=str(settings.log_file) if settings.log_file else None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


def _print_result_summary(result: BatchResult) -> None:
    """Print the final status line of a BatchResult."""
    print(
        f'Generated {result.total_questions} questions for '
        f'{result.total_documents} documents in "{result.output_path}" '
        f"({result.succeeded} succeeded, {result.failed} failed, "
        f"{result.duration_seconds:.1f}s)."
    )
    for outcome in result.outcomes:
        if not outcome.succeeded:
            print(f"  failed [{outcome.index}] {outcome.source}: {outcome.error}")
    if result.output_failed:
        print(f"  output not fully written: {result.output_error}")


if __name__ == "__main__":
    sys.exit(main())
