import io
from collections.abc import Iterator

import pdfplumber

from doc_classifier.sources.base import PagedPdfSource


class PdfPlumberSource(PagedPdfSource):
    """Text layer of searchable (OCR'd) PDFs via pdfplumber."""

    engine = "pdfplumber"

    def iter_pages(self, data: bytes) -> Iterator[str]:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            for page in pdf.pages:
                yield page.extract_text() or ""
