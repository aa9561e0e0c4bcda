import io
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import pytesseract
from PIL import Image, ImageOps

from allergyscan.config import settings

logger = logging.getLogger(__name__)


class TextExtractionError(Exception):
    """Raised when an image cannot be turned into text."""


class TesseractEngine:
    """Single-language Tesseract engine bound to one image for the duration of one call."""

    def __init__(self, image: Image.Image, language: str, preprocess: bool = True):
        self.image = image
        self.language = language
        self.preprocess = preprocess

    def recognize(self) -> str:
        image = self.image.convert("RGB")
        if self.preprocess:
            image = ImageOps.autocontrast(ImageOps.grayscale(image))
        return pytesseract.image_to_string(image, lang=self.language)


class TextExtractor:
    def __init__(self, language: Optional[str] = None, tesseract_cmd: Optional[str] = None, preprocess: Optional[bool] = None):
        self.language = language or settings.ocr_language
        self.tesseract_cmd = tesseract_cmd or settings.tesseract_cmd
        self.preprocess = settings.ocr_preprocess if preprocess is None else preprocess

    @contextmanager
    def engine(self, image_bytes: bytes) -> Iterator[TesseractEngine]:
        """Acquire an engine for one image; the image is always released afterwards."""
        if self.tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = self.tesseract_cmd
        image = Image.open(io.BytesIO(image_bytes))
        try:
            yield TesseractEngine(image, self.language, self.preprocess)
        finally:
            image.close()

    def extract_text(self, image_bytes: bytes) -> str:
        """Run OCR over raw image bytes and return the recognized text."""
        try:
            with self.engine(image_bytes) as engine:
                text = engine.recognize()
        except Exception as e:
            logger.error(f"OCR failed: {e}")
            raise TextExtractionError("Failed to process image") from e
        logger.debug(f"OCR extracted {len(text)} characters")
        return text
