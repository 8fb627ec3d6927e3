"""Batch processing for multiple OCR text files."""

import csv
import io
import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from card_contacts.models.contact import GOOGLE_CONTACT_HEADERS
from card_contacts.parser import ContactCardParser

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Result of batch processing multiple files."""

    results: list[dict] = field(default_factory=list)
    errors: list[dict] = field(default_factory=list)
    total_time_ms: float = 0.0

    @property
    def total(self) -> int:
        """Total number of processed files."""
        return len(self.results) + len(self.errors)

    @property
    def succeeded(self) -> int:
        """Number of successfully processed files."""
        return len(self.results)

    @property
    def failed(self) -> int:
        """Number of failed files."""
        return len(self.errors)


class BatchProcessor:
    """Process multiple OCR text files with error isolation."""

    TEXT_EXTENSIONS = {".txt"}

    def __init__(self, parser: ContactCardParser):
        """
        Initialize batch processor.

        Args:
            parser: ContactCardParser used for each file.
        """
        self._parser = parser

    def process(self, text_paths: list[Path]) -> BatchResult:
        """
        Process multiple text files, isolating errors per file.

        Args:
            text_paths: List of OCR text files to process.

        Returns:
            BatchResult with successful results and errors.
        """
        start_time = time.perf_counter()
        results: list[dict] = []
        errors: list[dict] = []

        for path in text_paths:
            try:
                card = self._parser.parse_text(path.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError, ValueError) as e:
                logger.warning("Failed to process %s: %s", path, e)
                errors.append({
                    "source_path": str(path),
                    "error": str(e),
                })
                continue

            result = card.model_dump(by_alias=True, exclude={"metadata", "raw_text"})
            result["source_path"] = str(path)
            results.append(result)

        elapsed_ms = (time.perf_counter() - start_time) * 1000

        return BatchResult(
            results=results,
            errors=errors,
            total_time_ms=round(elapsed_ms, 2),
        )

    def collect_inputs(self, inputs: list[Path]) -> list[Path]:
        """
        Collect text file paths from files and directories.

        Directories are scanned without recursion.

        Args:
            inputs: List of file paths or directories.

        Returns:
            Sorted, de-duplicated list of text files.
        """
        paths: list[Path] = []

        for path in inputs:
            if path.is_dir():
                paths.extend(
                    child
                    for child in path.iterdir()
                    if child.is_file() and child.suffix.lower() in self.TEXT_EXTENSIONS
                )
            elif path.is_file() and path.suffix.lower() in self.TEXT_EXTENSIONS:
                paths.append(path)

        return sorted(set(paths))

    def to_json(self, result: BatchResult) -> str:
        """
        Format batch result as JSON.

        Args:
            result: BatchResult to format.

        Returns:
            JSON string with metadata, results, and errors.
        """
        output = {
            "metadata": {
                "total": result.total,
                "succeeded": result.succeeded,
                "failed": result.failed,
                "total_time_ms": result.total_time_ms,
            },
            "results": result.results,
            "errors": result.errors,
        }
        return json.dumps(output, indent=2, ensure_ascii=False)

    def to_csv(self, result: BatchResult) -> str:
        """
        Format successful results as a Google Contacts import CSV.

        Failed files and LinkedIn URLs are left out so the file imports cleanly.

        Args:
            result: BatchResult to format.

        Returns:
            CSV string with one row per contact.
        """
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=list(GOOGLE_CONTACT_HEADERS))
        writer.writeheader()

        for item in result.results:
            contact = item.get("contact", {})
            writer.writerow({k: contact.get(k, "") for k in GOOGLE_CONTACT_HEADERS})

        return output.getvalue()
