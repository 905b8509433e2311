"""Tests for the document processing stages.

Tests all components:
- ParsingTask: PDF bytes and files to page Documents
- ChunkingTask: overlapping fixed-size windows
- VectorIndexTask / DocumentIndex: in-memory FAISS build and search
"""

import string
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from paper_analyzer.core.document_processing.tasks import (
    ChunkingTask,
    DocumentIndex,
    ParsingTask,
    VectorIndexTask,
)
from paper_analyzer.core.document_processing.tasks.parsing_task import (
    HEADER_SEARCH_BYTES,
    TEMP_DIR_PREFIX,
)
from paper_analyzer.core.exceptions import EmbeddingError, ParsingError, VectorStoreError


def separator_free_text(length: int) -> str:
    return "".join(string.ascii_lowercase[i % 26] for i in range(length))


# ============================================================================
# ParsingTask Tests
# ============================================================================


class TestParsingTask:
    """Test ParsingTask for PDF loading."""

    def test_parse_bytes_two_pages(self, two_page_pdf: bytes) -> None:
        """Should return one Document per page in order."""
        documents = ParsingTask().parse_bytes(two_page_pdf, "gnn.pdf")

        assert len(documents) == 2
        assert "Graph Neural Networks" in documents[0].page_content
        assert "Limitations" in documents[1].page_content
        assert [doc.metadata["page"] for doc in documents] == [0, 1]

    def test_parse_bytes_records_file_name_as_source(self, two_page_pdf: bytes) -> None:
        """Should replace the temp path with the uploaded file name."""
        documents = ParsingTask().parse_bytes(two_page_pdf, "gnn.pdf")

        assert all(doc.metadata["source"] == "gnn.pdf" for doc in documents)

    def test_parse_bytes_empty_buffer(self) -> None:
        """Should raise ParsingError for an empty buffer."""
        with pytest.raises(ParsingError) as exc_info:
            ParsingTask().parse_bytes(b"", "empty.pdf")

        assert "empty" in str(exc_info.value)
        assert exc_info.value.details["file_name"] == "empty.pdf"

    def test_parse_bytes_missing_header(self) -> None:
        """Should reject buffers that are not PDFs before touching the loader."""
        with pytest.raises(ParsingError) as exc_info:
            ParsingTask().parse_bytes(b"PK\x03\x04 this is a zip file", "paper.pdf")

        assert "%PDF-" in str(exc_info.value)

    def test_parse_bytes_leading_bytes_before_header(self, monkeypatch) -> None:
        """Should hand files with a short preamble before %PDF- to the loader."""
        loaded = []

        def fake_load(self, file_path, file_name):
            loaded.append(Path(file_path).read_bytes())
            return [Document(page_content="text", metadata={"source": file_name})]

        monkeypatch.setattr(ParsingTask, "_load", fake_load)
        content = b"\r\n\x00junk\n%PDF-1.4\n..."

        pages = ParsingTask().parse_bytes(content, "paper.pdf")

        assert loaded == [content]
        assert pages[0].page_content == "text"

    def test_parse_bytes_header_beyond_search_window(self) -> None:
        """Should reject buffers whose header appears only after the first KiB."""
        with pytest.raises(ParsingError) as exc_info:
            ParsingTask().parse_bytes(b"x" * HEADER_SEARCH_BYTES + b"%PDF-1.4", "paper.pdf")

        assert "%PDF-" in str(exc_info.value)

    def test_parse_bytes_corrupted_body(self) -> None:
        """Should wrap unreadable PDFs in ParsingError."""
        with pytest.raises(ParsingError):
            ParsingTask().parse_bytes(b"%PDF-1.4\n\x00\x01garbage without objects", "broken.pdf")

    def test_parse_bytes_blank_pages(self, pdf_factory) -> None:
        """Should fail when no page has extractable text."""
        with pytest.raises(ParsingError) as exc_info:
            ParsingTask().parse_bytes(pdf_factory([" ", " "]), "scan.pdf")

        assert "no extractable text" in str(exc_info.value)

    def test_parse_bytes_cleans_temp_dir(self, two_page_pdf, tmp_path, monkeypatch) -> None:
        """Should remove its temp directory after parsing."""
        monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))

        ParsingTask().parse_bytes(two_page_pdf, "gnn.pdf")
        with pytest.raises(ParsingError):
            ParsingTask().parse_bytes(b"%PDF-1.4\ngarbage", "broken.pdf")

        assert not [p for p in tmp_path.iterdir() if p.name.startswith(TEMP_DIR_PREFIX)]

    def test_parse_file_not_found(self) -> None:
        """Should raise ParsingError when file not found."""
        with pytest.raises(ParsingError) as exc_info:
            ParsingTask().parse("/nonexistent/file.pdf")

        assert "File not found" in str(exc_info.value)

    def test_parse_unsupported_suffix(self, tmp_path: Path) -> None:
        """Should reject non-PDF file names."""
        path = tmp_path / "notes.txt"
        path.write_text("plain text")

        with pytest.raises(ParsingError) as exc_info:
            ParsingTask().parse(str(path))

        assert "Only PDF files are supported" in str(exc_info.value)

    def test_parse_local_file(self, two_page_pdf: bytes, tmp_path: Path) -> None:
        """Should parse a PDF from disk."""
        path = tmp_path / "paper.pdf"
        path.write_bytes(two_page_pdf)

        documents = ParsingTask().parse(str(path))

        assert len(documents) == 2
        assert documents[0].metadata["source"] == "paper.pdf"


# ============================================================================
# ChunkingTask Tests
# ============================================================================


class TestChunkingTask:
    """Test ChunkingTask for document chunking."""

    def test_chunk_empty_documents_returns_empty(self) -> None:
        """Should return an empty list for empty input."""
        assert ChunkingTask().chunk([]) == []

    def test_overlap_must_be_smaller_than_size(self) -> None:
        """Should reject overlap >= size."""
        with pytest.raises(ValueError):
            ChunkingTask(chunk_size=200, chunk_overlap=200)

    def test_chunks_never_exceed_chunk_size(self) -> None:
        """Should keep every chunk within 1000 characters."""
        text = "Graph neural networks pass messages between nodes. " * 200
        chunks = ChunkingTask().chunk([Document(page_content=text, metadata={"page": 0})])

        assert len(chunks) > 1
        assert all(len(chunk.page_content) <= 1000 for chunk in chunks)

    def test_consecutive_chunks_overlap_by_configured_amount(self) -> None:
        """Should share exactly 200 characters between neighbours of separator-free text."""
        text = separator_free_text(2500)
        chunks = ChunkingTask(chunk_size=1000, chunk_overlap=200).chunk(
            [Document(page_content=text, metadata={})]
        )

        assert [len(c.page_content) for c in chunks] == [1000, 1000, 900]
        for left, right in zip(chunks, chunks[1:]):
            assert left.page_content[-200:] == right.page_content[:200]

    def test_chunking_is_deterministic(self) -> None:
        """Should produce identical chunks for identical input."""
        text = "Results improve on the benchmark by twelve percent. " * 120
        task = ChunkingTask()

        first = task.chunk([Document(page_content=text, metadata={"page": 0})])
        second = task.chunk([Document(page_content=text, metadata={"page": 0})])

        assert [c.page_content for c in first] == [c.page_content for c in second]
        assert [c.metadata for c in first] == [c.metadata for c in second]

    def test_chunk_preserves_metadata(self) -> None:
        """Should keep page metadata and add start_index on every chunk."""
        doc = Document(
            page_content="Content to be chunked. " * 100,
            metadata={"source": "paper.pdf", "page": 3},
        )

        chunks = ChunkingTask(chunk_size=100, chunk_overlap=20).chunk([doc])

        for chunk in chunks:
            assert chunk.metadata["source"] == "paper.pdf"
            assert chunk.metadata["page"] == 3
            assert "start_index" in chunk.metadata


# ============================================================================
# VectorIndexTask Tests
# ============================================================================


class TestVectorIndexTask:
    """Test VectorIndexTask for in-memory indexing."""

    def test_build_empty_raises(self, fake_embeddings) -> None:
        """Should refuse to build an index from zero chunks."""
        with pytest.raises(VectorStoreError) as exc_info:
            VectorIndexTask(fake_embeddings).build([])

        assert exc_info.value.details["operation"] == "build"

    def test_build_wraps_embedding_failure(self) -> None:
        """Should wrap provider errors in EmbeddingError."""
        embeddings = MagicMock(spec=Embeddings)
        embeddings.embed_documents.side_effect = RuntimeError("API key not valid")

        with pytest.raises(EmbeddingError) as exc_info:
            VectorIndexTask(embeddings).build(
                [Document(page_content="text", metadata={"source": "a.pdf"})]
            )

        assert "API key not valid" in str(exc_info.value)
        assert exc_info.value.details["file_name"] == "a.pdf"

    def test_build_assigns_chunk_ids(self, fake_embeddings) -> None:
        """Should tag chunks with deterministic ids and positions."""
        chunks = [
            Document(page_content="alpha", metadata={"source": "a.pdf"}),
            Document(page_content="alpha", metadata={"source": "a.pdf"}),
        ]

        index = VectorIndexTask(fake_embeddings).build(chunks)

        assert isinstance(index, DocumentIndex)
        assert index.chunk_count == 2
        assert chunks[0].metadata["chunk_index"] == 0
        assert chunks[0].metadata["chunk_id"] != chunks[1].metadata["chunk_id"]

    @pytest.mark.asyncio
    async def test_search_returns_top_k(self, fake_embeddings) -> None:
        """Should return at most k chunks, exact match first."""
        chunks = [
            Document(page_content=f"chunk number {i}", metadata={"source": "a.pdf"})
            for i in range(10)
        ]
        index = VectorIndexTask(fake_embeddings).build(chunks)

        results = await index.asearch("chunk number 7", k=4)

        assert len(results) == 4
        assert results[0].page_content == "chunk number 7"

    @pytest.mark.asyncio
    async def test_search_failure_raises_vector_store_error(self, fake_embeddings) -> None:
        """Should wrap query embedding failures."""
        store = MagicMock()
        store.asimilarity_search.side_effect = RuntimeError("network down")
        index = DocumentIndex(store, chunk_count=1)

        with pytest.raises(VectorStoreError) as exc_info:
            await index.asearch("anything")

        assert exc_info.value.details["operation"] == "search"
