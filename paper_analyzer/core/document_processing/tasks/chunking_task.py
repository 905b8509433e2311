"""
Text chunking task using RecursiveCharacterTextSplitter.

Splits page documents into overlapping windows while preserving context.

Dependencies: langchain_text_splitters
System role: Second stage of the paper analysis pipeline
"""

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter


class ChunkingTask:
    """Split documents into chunks using RecursiveCharacterTextSplitter."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks

        Raises:
            ValueError: When chunk_overlap is not smaller than chunk_size
        """
        if chunk_overlap >= chunk_size:
            raise ValueError(
                f"chunk_overlap ({chunk_overlap}) must be smaller than chunk_size ({chunk_size})"
            )

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            add_start_index=True,
            length_function=len,
        )

    def chunk(self, documents: list[Document]) -> list[Document]:
        """
        Split documents into chunks.

        Args:
            documents: LangChain Documents to split

        Returns:
            list[Document]: Chunked documents with preserved metadata
                (empty when there is nothing to split)
        """
        if not documents:
            return []

        return self._splitter.split_documents(documents)
