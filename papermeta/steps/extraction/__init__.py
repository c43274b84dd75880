from papermeta.steps.extraction.pdfs import PdfExtractor, read_pdf_text
from papermeta.steps.extraction.texts import TextExtractor

__all__ = ["PdfExtractor", "TextExtractor", "read_pdf_text"]
