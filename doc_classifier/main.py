#!/usr/bin/env python3
"""Classify OCR'd documents and optionally filter them by search keywords."""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from doc_classifier.classification.factory import ClassifierFactory
from doc_classifier.config.settings import Settings
from doc_classifier.logging.logger import Log
from doc_classifier.processor.batch import BatchProcessor
from doc_classifier.processor.models import DocumentClassification, DocumentText
from doc_classifier.processor.search import parse_search_keywords
from doc_classifier.sources.exceptions import FileValidationError, TextSourceError
from doc_classifier.sources.factory import TextSourceFactory
from doc_classifier.sources.file_loader import FileLoader
from doc_classifier.sources.validator import FileValidator

EXIT_INVALID_INPUT = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classify OCR text of scanned documents.")
    parser.add_argument("files", type=Path, nargs="+", help="Text (.txt) or searchable PDF files")
    parser.add_argument(
        "--keywords",
        type=str,
        default="",
        help="Comma-separated search keywords, e.g. 'ゲートウェイ, 設置前'",
    )
    parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="Output JSON file",
    )
    return parser.parse_args(argv)


def to_payload(result: DocumentClassification) -> dict[str, Any]:
    classification = asdict(result.classification)
    return {
        "document_id": result.document_id,
        **classification,
        "ocr_confidence": result.ocr_confidence,
        "matched_keywords": list(result.matched_keywords),
        "is_matched": result.is_matched,
        "error": result.error,
    }


def load_documents(
    loader: FileLoader, paths: list[Path]
) -> tuple[list[DocumentText], list[DocumentClassification]]:
    """Read every file; one that cannot be read becomes a failed record instead."""
    documents: list[DocumentText] = []
    failures: list[DocumentClassification] = []
    for path in paths:
        try:
            documents.append(loader.load(path))
        except (TextSourceError, OSError) as exc:
            Log.error(f"Could not load {path}: {exc}")
            failures.append(DocumentClassification.failed(str(path), str(exc)))
    return documents, failures


def run(args: argparse.Namespace, settings: Settings) -> int:
    validator = FileValidator(
        max_files=settings.max_files,
        max_size_mb=settings.max_file_size_mb,
        allowed_extensions=TextSourceFactory.supported_extensions(),
    )
    paths = list(dict.fromkeys(args.files))
    try:
        validator.check(paths)
    except FileValidationError as exc:
        Log.error(f"Invalid input: {exc}")
        return EXIT_INVALID_INPUT

    documents, failures = load_documents(FileLoader(settings), paths)
    processor = BatchProcessor(
        ClassifierFactory.create(settings),
        max_workers=settings.batch_max_workers,
    )
    keywords = parse_search_keywords(args.keywords)
    classified = processor.process(documents, keywords=keywords or None)
    by_id = {result.document_id: result for result in [*classified, *failures]}
    results = [by_id[str(path)] for path in paths]

    payload = [to_payload(result) for result in results]
    args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    Log.info(f"Wrote {len(results)} results to {args.output}")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point: settings -> logging -> validate -> load -> classify -> write."""
    settings = Settings()
    Log.configure(settings.log_level)
    sys.exit(run(parse_args(argv), settings))


if __name__ == "__main__":
    main()
