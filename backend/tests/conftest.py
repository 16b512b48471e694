"""Shared fixtures: settings, generated documents and a stubbed provider."""

import io
import json
from typing import Callable, List

import fitz
import httpx
import openpyxl
import pytest

from docqa.config import Settings


@pytest.fixture
def upload_dir(tmp_path):
    """Scratch directory for uploads, isolated per test."""
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def settings(upload_dir):
    """Settings with a fake API key and no .env lookup."""
    return Settings(
        _env_file=None,
        gemini_api_key="test-key",
        upload_dir=str(upload_dir),
        environment="test",
    )


def make_xlsx(sheets: dict) -> bytes:
    """Build an .xlsx file from ``{sheet_name: [row, ...]}``, preserving order."""
    workbook = openpyxl.Workbook()
    workbook.remove(workbook.active)
    for name, rows in sheets.items():
        sheet = workbook.create_sheet(title=name)
        for row in rows:
            sheet.append(row)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def make_pdf(pages: List[str]) -> bytes:
    """Build a PDF with one page per entry; empty strings give blank pages."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def people_xlsx() -> bytes:
    return make_xlsx({"Sheet1": [["Name", "Age"], ["Ann", 30]]})


@pytest.fixture
def text_pdf() -> bytes:
    return make_pdf(["Invoice number 4711", "Total due: 250 EUR"])


@pytest.fixture
def blank_pdf() -> bytes:
    return make_pdf(["", ""])


def gemini_answer(text: str) -> dict:
    """Minimal successful generateContent body."""
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": text}], "role": "model"},
                "finishReason": "STOP",
            }
        ]
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)

    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_transport():
    """Factory for a recording transport answering with a fixed status and body."""

    def _make(status_code: int = 200, body=None, handler=None) -> RecordingTransport:
        if handler is None:
            def handler(request: httpx.Request) -> httpx.Response:
                if isinstance(body, (dict, list)):
                    return httpx.Response(status_code, json=body)
                return httpx.Response(status_code, text=body or "")
        return RecordingTransport(handler)

    return _make
