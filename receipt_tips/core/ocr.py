"""
OCR functionality for turning receipt images and PDFs into text.
"""

from pathlib import Path

from .utils import IMAGE_EXTS, PDF_EXTS

DEFAULT_LANG = "eng"


def _lazy_import_ocr_deps():
    """Lazy import heavy OCR dependencies."""
    global pytesseract, PIL_Image, fitz
    import importlib
    pytesseract = importlib.import_module("pytesseract")
    PIL_Image = importlib.import_module("PIL.Image")
    fitz = importlib.import_module("fitz")  # pymupdf


# Initialize on first use
pytesseract = None
PIL_Image = None
fitz = None


def ocr_image_to_text(img_path: Path, lang: str = DEFAULT_LANG) -> str:
    """OCR an image file to text."""
    if pytesseract is None:
        _lazy_import_ocr_deps()

    with PIL_Image.open(img_path) as img:
        return pytesseract.image_to_string(img, lang=lang)


def pdf_to_text(pdf_path: Path) -> str:
    """Extract text from a searchable PDF using PyMuPDF."""
    if fitz is None:
        _lazy_import_ocr_deps()

    doc = fitz.open(pdf_path.as_posix())
    try:
        return "\n".join(page.get_text() for page in doc)
    finally:
        doc.close()


def recognize(path: Path, lang: str = DEFAULT_LANG) -> str:
    """
    Recognize the text of a receipt file.

    Images go through Tesseract as loaded; PDFs are read from their text
    layer.

    Raises:
        ValueError: for unsupported file types
    """
    path = Path(path)
    ext = path.suffix.lower()
    if ext in IMAGE_EXTS:
        return ocr_image_to_text(path, lang=lang)
    if ext in PDF_EXTS:
        return pdf_to_text(path)
    raise ValueError(f"Unsupported file type: {path}")
