"""
In-memory vector index task.

Embeds document chunks and builds an ephemeral FAISS index for one paper.
The index is never persisted and never shared across requests.

Dependencies: langchain_community.vectorstores, faiss-cpu, langchain_core
System role: Third stage of the paper analysis pipeline
"""

import hashlib
import logging

from langchain_community.vectorstores import FAISS
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from paper_analyzer.core.exceptions import EmbeddingError, VectorStoreError

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 4


class DocumentIndex:
    """Build-once, query-many FAISS index over a single paper's chunks."""

    def __init__(self, store: FAISS, chunk_count: int) -> None:
        self._store = store
        self.chunk_count = chunk_count

    async def asearch(self, query: str, k: int = DEFAULT_TOP_K) -> list[Document]:
        """
        Return the top-k chunks most similar to the query.

        Args:
            query: Natural-language query, embedded by the index's provider
            k: Number of chunks to return

        Returns:
            list[Document]: Matching chunks, best first

        Raises:
            VectorStoreError: When query embedding or search fails
        """
        try:
            return await self._store.asimilarity_search(query, k=k)
        except Exception as e:
            raise VectorStoreError(
                f"Similarity search failed: {e}",
                operation="search",
                details={"k": k},
            ) from e


class VectorIndexTask:
    """Embed chunks and build a DocumentIndex."""

    def __init__(self, embeddings: Embeddings) -> None:
        """
        Initialize vector index task.

        Args:
            embeddings: Embedding provider used for chunks and queries
        """
        self._embeddings = embeddings

    def _generate_chunk_id(self, content: str, metadata: dict, chunk_index: int) -> str:
        """
        Generate deterministic chunk ID from content and position.

        Args:
            content: Chunk text content
            metadata: Chunk metadata
            chunk_index: Position of the chunk in the document

        Returns:
            str: SHA-256 hash prefix (16 chars)
        """
        source = metadata.get("source", "")
        page = metadata.get("page", 0)
        start_index = metadata.get("start_index", 0)
        hash_input = f"{content}:{source}:{page}:{start_index}:{chunk_index}"
        return hashlib.sha256(hash_input.encode()).hexdigest()[:16]

    def build(self, chunks: list[Document]) -> DocumentIndex:
        """
        Embed all chunks and build an in-memory FAISS index.

        Args:
            chunks: Chunked LangChain Documents

        Returns:
            DocumentIndex: Queryable index owned by the caller

        Raises:
            VectorStoreError: When there are no chunks to index
            EmbeddingError: When embedding the chunks fails
        """
        if not chunks:
            raise VectorStoreError("No chunks to index", operation="build")

        chunk_ids = []
        for i, chunk in enumerate(chunks):
            chunk_id = self._generate_chunk_id(chunk.page_content, chunk.metadata, i)
            chunk.metadata["chunk_id"] = chunk_id
            chunk.metadata["chunk_index"] = i
            chunk_ids.append(chunk_id)

        source = chunks[0].metadata.get("source")
        try:
            store = FAISS.from_documents(chunks, self._embeddings, ids=chunk_ids)
        except Exception as e:
            logger.error(
                "Failed to embed chunks",
                extra={"file_name": source, "chunk_count": len(chunks), "error": str(e)},
            )
            raise EmbeddingError(
                f"Failed to generate embeddings: {e}",
                file_name=source,
                details={"chunk_count": len(chunks)},
            ) from e

        logger.info(
            "Built vector index",
            extra={"file_name": source, "chunk_count": len(chunks)},
        )
        return DocumentIndex(store, chunk_count=len(chunks))
