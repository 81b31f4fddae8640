# -*- coding: utf-8 -*-
from pathlib import Path

import pdfplumber
import requests
import tempfile

DOWNLOAD_TIMEOUT = 30.0


def _is_url(path_or_url: str) -> bool:
    return path_or_url.startswith('http://') or path_or_url.startswith('https://')


def _download(url: str) -> str:
    """
    Downloads a remote syllabus and returns the local file path.
    :param url: URL of a PDF or plain text syllabus.
    :return: Path of a temporary file holding the download.
    """
    response = requests.get(url, timeout=DOWNLOAD_TIMEOUT)
    response.raise_for_status()
    content_type = response.headers.get("Content-Type", "")
    suffix = ".pdf" if url.lower().endswith(".pdf") or "pdf" in content_type else ".txt"
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as tmp_file:
        tmp_file.write(response.content)
        return tmp_file.name


def extract_pdf_pages(pdf_path: str) -> list[str]:
    """
    Extracts the text of each page of a local PDF, skipping empty pages.
    :param pdf_path: A local file path to a PDF file.
    :return: The stripped text of every non-empty page.
    """
    pages: list[str] = []
    with pdfplumber.open(pdf_path) as pdf:
        for page in pdf.pages:
            text = page.extract_text()
            if text:
                pages.append(text.strip())
    return pages


def load_syllabus_text(path_or_url: str) -> str:
    """
    Loads syllabus text from a local file or a URL.
    PDFs are read page by page; anything else is read as UTF-8 text.
    :param path_or_url: A local file path or a URL.
    :return: The syllabus text.
    """
    local_path = _download(path_or_url) if _is_url(path_or_url) else path_or_url
    path = Path(local_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    if path.suffix.lower() == ".pdf":
        return "\n\n".join(extract_pdf_pages(str(path)))
    return path.read_text(encoding="utf-8")
