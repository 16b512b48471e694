"""Document-to-text extraction for PDF and spreadsheet uploads"""
import csv
import datetime
import io
import logging
from typing import Any, Iterable, List, Sequence, Tuple, Union

import fitz  # PyMuPDF
import openpyxl
import xlrd

from ..models.document import ExtractedContent, MediaType, UploadedDocument
from ..utils.errors import NoTextContent, ParseFailure, UnsupportedType

logger = logging.getLogger(__name__)

Rows = List[Sequence[Any]]

ZIP_SIGNATURE = b"PK\x03\x04"
OLE2_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


def _format_cell(value: Any) -> str:
    """Render one cell value the way a spreadsheet CSV export would"""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, datetime.datetime):
        if value.time() == datetime.time(0, 0):
            return value.date().isoformat()
        return value.isoformat(sep=" ")
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


def rows_to_csv(rows: Iterable[Sequence[Any]]) -> str:
    """Render rows as comma-separated text, one line per row, no trailing newline"""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for row in rows:
        fields = [_format_cell(value) for value in row]
        if len(fields) == 1 and not fields[0]:
            # csv quotes a lone empty field; an empty single-column row stays blank
            buffer.write("\n")
        else:
            writer.writerow(fields)
    return buffer.getvalue()[:-1]


class ContentExtractor:
    """Turn an uploaded PDF or workbook into plain text"""

    def extract(self, data: bytes, media_type: Union[MediaType, str, None]) -> str:
        """
        Extract normalized plain text from a document buffer

        Args:
            data: Raw file bytes
            media_type: Declared media type of the upload

        Returns:
            Non-empty, whitespace-trimmed text

        Raises:
            UnsupportedType: media type is outside the allow-list
            ParseFailure: the buffer could not be decoded
            NoTextContent: the document holds no extractable text
        """
        declared = MediaType.parse(media_type)
        if declared is None:
            raise UnsupportedType(str(media_type) if media_type is not None else None)

        if declared is MediaType.PDF:
            return self._extract_pdf(data)
        return self._extract_spreadsheet(data, declared)

    def extract_document(self, document: UploadedDocument) -> ExtractedContent:
        """Extract an uploaded document and tag the text with its source name"""
        logger.info(
            f"Extracting {document.original_name} "
            f"({document.media_type.value}, {document.size_bytes} bytes)"
        )
        text = self.extract(document.data, document.media_type)
        logger.info(f"Extracted {len(text)} characters from {document.original_name}")
        return ExtractedContent(text=text, source_name=document.original_name)

    # ------------------------------------------------------------------
    # Spreadsheets
    # ------------------------------------------------------------------

    @staticmethod
    def _workbook_format(data: bytes, media_type: MediaType) -> MediaType:
        """Pick the reader from the container signature, falling back to the declared type.

        Browsers on Windows often label .xlsx uploads as application/vnd.ms-excel.
        """
        if data.startswith(ZIP_SIGNATURE):
            return MediaType.XLSX
        if data.startswith(OLE2_SIGNATURE):
            return MediaType.XLS
        return media_type

    def _extract_spreadsheet(self, data: bytes, media_type: MediaType) -> str:
        workbook_format = self._workbook_format(data, media_type)
        if workbook_format is not media_type:
            logger.info(f"Upload declared as {media_type.value} is a {workbook_format.name} workbook")
        try:
            if workbook_format is MediaType.XLSX:
                sheets = self._read_xlsx(data)
            else:
                sheets = self._read_xls(data)
        except Exception as e:
            logger.error(f"Error parsing spreadsheet ({media_type.value}): {e!r}")
            raise ParseFailure("spreadsheet", e) from e

        content = ""
        for sheet_name, rows in sheets:
            content += f"Sheet: {sheet_name}\n{rows_to_csv(rows)}\n\n"
        content = content.strip()

        if not content:
            raise NoTextContent("spreadsheet")

        logger.debug(f"Rendered {len(sheets)} sheet(s) to text")
        return content

    def _read_xlsx(self, data: bytes) -> List[Tuple[str, Rows]]:
        workbook = openpyxl.load_workbook(io.BytesIO(data), data_only=True)
        try:
            return [
                (sheet.title, [tuple(row) for row in sheet.iter_rows(values_only=True)])
                for sheet in workbook.worksheets
            ]
        finally:
            workbook.close()

    def _read_xls(self, data: bytes) -> List[Tuple[str, Rows]]:
        book = xlrd.open_workbook(file_contents=data)
        try:
            return [
                (sheet.name, [self._xls_row(book, sheet, r) for r in range(sheet.nrows)])
                for sheet in book.sheets()
            ]
        finally:
            book.release_resources()

    @staticmethod
    def _xls_row(book: "xlrd.book.Book", sheet: "xlrd.sheet.Sheet", rowx: int) -> List[Any]:
        values: List[Any] = []
        for cell in sheet.row(rowx):
            if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK, xlrd.XL_CELL_ERROR):
                values.append(None)
            elif cell.ctype == xlrd.XL_CELL_BOOLEAN:
                values.append(bool(cell.value))
            elif cell.ctype == xlrd.XL_CELL_DATE:
                values.append(xlrd.xldate.xldate_as_datetime(cell.value, book.datemode))
            else:
                values.append(cell.value)
        return values

    # ------------------------------------------------------------------
    # PDF
    # ------------------------------------------------------------------

    def _extract_pdf(self, data: bytes) -> str:
        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            logger.error(f"Error opening PDF: {e!r}")
            raise ParseFailure("pdf", e) from e

        try:
            pages: List[str] = [page.get_text() for page in doc]
        except Exception as e:
            logger.error(f"Error reading PDF text: {e!r}")
            raise ParseFailure("pdf", e) from e
        finally:
            doc.close()

        text = "\n\n".join(pages).strip()
        if not text:
            logger.warning(f"PDF has {len(pages)} page(s) but no text layer")
            raise NoTextContent("pdf")
        return text

