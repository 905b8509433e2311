"""
Document parsing task using LangChain PyPDFLoader.

Converts PDF documents (local files or uploaded byte buffers) into
page-level LangChain Documents.

Dependencies: langchain_community.document_loaders, pypdf
System role: First stage of the paper analysis pipeline
"""

import logging
import shutil
import tempfile
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader
from langchain_core.documents import Document

from paper_analyzer.core.exceptions import ParsingError

logger = logging.getLogger(__name__)

PDF_HEADER = b"%PDF-"
HEADER_SEARCH_BYTES = 1024
TEMP_DIR_PREFIX = "paper_analyzer_"


class ParsingTask:
    """Parse PDF documents into LangChain Documents, one per page."""

    def parse(self, file_path: str) -> list[Document]:
        """
        Parse PDF document into LangChain Documents.

        Args:
            file_path: Path to PDF document

        Returns:
            list[Document]: Parsed pages with content and metadata

        Raises:
            ParsingError: When document parsing fails
        """
        path = Path(file_path)
        if not path.exists():
            raise ParsingError(f"File not found: {file_path}", path.name)

        if not path.suffix.lower() == ".pdf":
            raise ParsingError(
                f"Unsupported file format: {path.suffix}. Only PDF files are supported.",
                path.name,
            )

        return self._load(str(path), path.name)

    def parse_bytes(self, content: bytes, file_name: str = "document.pdf") -> list[Document]:
        """
        Parse an in-memory PDF buffer into LangChain Documents.

        The buffer is written to a private temp directory for PyPDFLoader and
        the directory is removed afterwards, whether parsing succeeds or not.

        Args:
            content: Raw PDF bytes
            file_name: Original file name, recorded as the chunk source

        Returns:
            list[Document]: Parsed pages with content and metadata

        Raises:
            ParsingError: Empty buffer, missing PDF header, unreadable PDF,
                zero pages, or no extractable text
        """
        if not content:
            raise ParsingError("PDF document is empty", file_name)

        if PDF_HEADER not in content[:HEADER_SEARCH_BYTES]:
            raise ParsingError("Buffer is not a PDF (missing %PDF- header)", file_name)

        temp_dir = tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX)
        try:
            temp_path = Path(temp_dir) / "upload.pdf"
            temp_path.write_bytes(content)
            return self._load(str(temp_path), file_name)
        finally:
            shutil.rmtree(temp_dir, ignore_errors=True)

    def _load(self, file_path: str, file_name: str) -> list[Document]:
        try:
            documents = PyPDFLoader(file_path).load()
        except Exception as e:
            raise ParsingError(f"Failed to parse PDF: {e}", file_name) from e

        if not documents:
            raise ParsingError("PDF document has no pages", file_name)

        if not any(doc.page_content.strip() for doc in documents):
            raise ParsingError("PDF document contains no extractable text", file_name)

        for doc in documents:
            doc.metadata["source"] = file_name

        logger.debug(
            "Parsed PDF",
            extra={"file_name": file_name, "page_count": len(documents)},
        )
        return documents
