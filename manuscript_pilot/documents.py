# Copyright 2026 Chisom Ubabukoh
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Text and image extraction from uploaded files."""

from __future__ import annotations

import io
import mimetypes
from pathlib import Path
from typing import BinaryIO, Union

import pdfplumber
from docx import Document as DocxDocument

from manuscript_pilot.logging_utils import get_logger
from manuscript_pilot.models import FigureImage

LOGGER = get_logger("manuscript_pilot.documents")

Source = Union[str, Path, BinaryIO]

IMAGE_MIME_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "webp": "image/webp",
}
PDF_RESOLUTION = 200


class DocumentError(RuntimeError):
    """Raised when an uploaded document cannot be read."""


def extract_text_from_pdf(uploaded_file: Source) -> str:
    """Extract full text from an uploaded PDF file."""
    text = ""
    try:
        with pdfplumber.open(uploaded_file) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text += page_text + "\n"
    except Exception as exc:
        raise DocumentError(f"Error reading PDF: {exc}") from exc
    return text.strip()


def extract_text_from_docx(uploaded_file: Source) -> str:
    """Extract full text from an uploaded Word document."""
    text = ""
    try:
        doc = DocxDocument(uploaded_file)
        for para in doc.paragraphs:
            text += para.text + "\n"
    except Exception as exc:
        raise DocumentError(f"Error reading Word document: {exc}") from exc
    return text.strip()


def extract_text(uploaded_file: Source, filename: str) -> str:
    """Dispatch on the file extension; plain text is decoded as UTF-8."""
    suffix = Path(filename).suffix.lower()
    if suffix == ".pdf":
        return extract_text_from_pdf(uploaded_file)
    if suffix == ".docx":
        return extract_text_from_docx(uploaded_file)
    if suffix in (".txt", ".md"):
        raw = uploaded_file.read() if hasattr(uploaded_file, "read") else Path(uploaded_file).read_bytes()
        return raw.decode("utf-8", errors="replace").strip()
    raise DocumentError(f"Unsupported document type: {suffix or filename}")


def mime_type_for(filename: str) -> str:
    suffix = Path(filename).suffix.lower().lstrip(".")
    if suffix in IMAGE_MIME_TYPES:
        return IMAGE_MIME_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(filename)
    return guessed or "application/octet-stream"


def rasterize_pdf_first_page(uploaded_file: Source, resolution: int = PDF_RESOLUTION) -> FigureImage:
    """Render the first page of a PDF figure to PNG."""
    try:
        with pdfplumber.open(uploaded_file) as pdf:
            if not pdf.pages:
                raise DocumentError("PDF has no pages")
            rendered = pdf.pages[0].to_image(resolution=resolution).original
            buffer = io.BytesIO()
            rendered.save(buffer, format="PNG")
    except DocumentError:
        raise
    except Exception as exc:
        raise DocumentError(f"Error rendering PDF figure: {exc}") from exc
    LOGGER.debug("Rasterised PDF figure at %d dpi", resolution)
    return FigureImage(data=buffer.getvalue(), mime_type="image/png")


def image_from_upload(data: bytes, filename: str) -> FigureImage:
    """Turn an uploaded figure (image or PDF) into a FigureImage."""
    mime = mime_type_for(filename)
    if mime == "application/pdf":
        return rasterize_pdf_first_page(io.BytesIO(data))
    if not mime.startswith("image/"):
        raise DocumentError(f"Unsupported figure type: {filename}")
    return FigureImage(data=data, mime_type=mime)
