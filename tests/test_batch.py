"""Tests for batch processing."""

import json
from pathlib import Path
from unittest.mock import Mock

from card_contacts.batch import BatchProcessor, BatchResult
from card_contacts.extractor.heuristic import HeuristicExtractor
from card_contacts.models.contact import GOOGLE_CONTACT_HEADERS
from card_contacts.parser import ContactCardParser


class TestBatchResult:
    """Test BatchResult dataclass."""

    def test_empty_result(self):
        """Test empty batch result."""
        result = BatchResult()
        assert result.total == 0
        assert result.succeeded == 0
        assert result.failed == 0

    def test_result_with_mixed(self):
        """Test batch result with mixed success/failure."""
        result = BatchResult(
            results=[{"source_path": "a.txt"}],
            errors=[{"source_path": "bad.txt", "error": "unreadable"}],
            total_time_ms=200.0,
        )
        assert result.total == 2
        assert result.succeeded == 1
        assert result.failed == 1


class TestBatchProcessor:
    """Test BatchProcessor class."""

    def _processor(self) -> BatchProcessor:
        return BatchProcessor(ContactCardParser(extractor=HeuristicExtractor()))

    def test_process_success(self, tmp_path):
        """Test processing multiple files successfully."""
        a = tmp_path / "a.txt"
        b = tmp_path / "b.txt"
        a.write_text("Jane Doe\njane@acme.com", encoding="utf-8")
        b.write_text("John Smith\nGLOBEX", encoding="utf-8")

        result = self._processor().process([a, b])

        assert result.succeeded == 2
        assert result.failed == 0
        assert result.results[0]["source_path"] == str(a)
        assert result.results[0]["contact"]["E-mail 1 - Value"] == "jane@acme.com"
        assert result.results[1]["contact"]["Organization 1 - Name"] == "GLOBEX"

    def test_process_with_errors(self, tmp_path):
        """Test failures are isolated per file."""
        good = tmp_path / "good.txt"
        good.write_text("Jane Doe", encoding="utf-8")
        missing = tmp_path / "missing.txt"

        result = self._processor().process([good, missing])

        assert result.succeeded == 1
        assert result.failed == 1
        assert result.errors[0]["source_path"] == str(missing)

    def test_process_parser_error_isolated(self, tmp_path):
        """Test ValueErrors from the parser are recorded."""
        path = tmp_path / "card.txt"
        path.write_text("text", encoding="utf-8")
        parser = Mock()
        parser.parse_text.side_effect = ValueError("bad input")

        result = BatchProcessor(parser).process([path])

        assert result.failed == 1
        assert "bad input" in result.errors[0]["error"]

    def test_collect_inputs_from_files(self, tmp_path):
        """Test collecting text files from a file list."""
        (tmp_path / "a.txt").touch()
        (tmp_path / "b.jpg").touch()

        paths = self._processor().collect_inputs([tmp_path / "a.txt", tmp_path / "b.jpg"])

        assert paths == [tmp_path / "a.txt"]

    def test_collect_inputs_from_directory(self, tmp_path):
        """Test collecting from a directory, sorted and de-duplicated."""
        (tmp_path / "card2.TXT").touch()
        (tmp_path / "card1.txt").touch()
        (tmp_path / "notes.md").touch()

        paths = self._processor().collect_inputs([tmp_path, tmp_path / "card1.txt"])

        assert paths == [tmp_path / "card1.txt", tmp_path / "card2.TXT"]

    def test_to_json(self):
        """Test JSON output format."""
        result = BatchResult(
            results=[{"source_path": "a.txt", "contact": {"Name": "Test"}}],
            errors=[{"source_path": "bad.txt", "error": "Failed"}],
            total_time_ms=123.45,
        )

        data = json.loads(self._processor().to_json(result))

        assert data["metadata"]["total"] == 2
        assert data["metadata"]["succeeded"] == 1
        assert data["metadata"]["failed"] == 1
        assert data["metadata"]["total_time_ms"] == 123.45
        assert len(data["results"]) == 1
        assert len(data["errors"]) == 1

    def test_to_csv(self, tmp_path):
        """Test CSV output uses Google Contacts headers and skips errors."""
        path = tmp_path / "a.txt"
        path.write_text("John Doe\nTech Corp", encoding="utf-8")
        processor = self._processor()
        result = processor.process([path, Path(tmp_path / "missing.txt")])

        lines = processor.to_csv(result).splitlines()

        assert lines[0] == ",".join(GOOGLE_CONTACT_HEADERS)
        assert len(lines) == 2
        assert "John Doe,John,Doe" in lines[1]
        assert "Tech Corp" in lines[1]
        assert "linkedin" not in lines[0].lower()
