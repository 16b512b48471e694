"""
Tests for scratch-file lifetime and the error envelope.
"""

import json

import pytest

from docqa.utils.errors import ParseFailure, RateLimited, UnsupportedType, ValidationError
from docqa.utils.helpers import error_response, purge_upload_dir, scratch_file


class TestScratchFile:
    def test_removed_after_success(self, upload_dir):
        with scratch_file(str(upload_dir), "report.PDF") as path:
            with open(path, "wb") as f:
                f.write(b"data")
            assert path.endswith(".pdf")

        assert list(upload_dir.iterdir()) == []

    def test_removed_after_failure(self, upload_dir):
        with pytest.raises(RuntimeError):
            with scratch_file(str(upload_dir), "book.xlsx") as path:
                with open(path, "wb") as f:
                    f.write(b"data")
                raise RuntimeError("extraction blew up")

        assert list(upload_dir.iterdir()) == []

    def test_never_written(self, upload_dir):
        with scratch_file(str(upload_dir)):
            pass

        assert list(upload_dir.iterdir()) == []

    def test_creates_missing_directory(self, tmp_path):
        target = tmp_path / "nested" / "uploads"

        with scratch_file(str(target), "a.pdf"):
            assert target.is_dir()

    def test_paths_are_unique(self, upload_dir):
        with scratch_file(str(upload_dir), "a.pdf") as first, scratch_file(str(upload_dir), "a.pdf") as second:
            assert first != second


class TestPurge:
    def test_removes_only_scratch_files(self, upload_dir):
        (upload_dir / "upload-abc.pdf").write_bytes(b"x")
        (upload_dir / "upload-def.xlsx").write_bytes(b"x")
        (upload_dir / ".gitkeep").write_bytes(b"")

        removed = purge_upload_dir(str(upload_dir))

        assert removed == 2
        assert [p.name for p in upload_dir.iterdir()] == [".gitkeep"]

    def test_missing_directory(self, tmp_path):
        assert purge_upload_dir(str(tmp_path / "absent")) == 0


class TestErrorResponse:
    def test_envelope_without_details(self):
        response = error_response(429, "Failed to generate response", "slow down", exc=RateLimited())

        assert response.status_code == 429
        assert json.loads(response.body) == {
            "error": "Failed to generate response",
            "message": "slow down",
        }

    def test_details_when_allowed(self):
        try:
            raise ParseFailure("pdf", ValueError("xref table broken"))
        except ParseFailure as e:
            response = error_response(500, "Failed to process file", e.message, exc=e, include_details=True)

        assert "ParseFailure" in json.loads(response.body)["details"]


class TestErrorTaxonomy:
    def test_status_codes(self):
        assert UnsupportedType("text/plain").status_code == 400
        assert ParseFailure("pdf").status_code == 500
        assert RateLimited().status_code == 429
        assert ValidationError("Missing question", "Please provide a question").status_code == 400

    def test_kind(self):
        assert RateLimited().kind == "RateLimited"
        assert ParseFailure("spreadsheet").kind == "ParseFailure"
