"""
Paper analysis pipeline orchestrator.

Coordinates parsing, chunking, vector indexing, and the five concurrent
retrieval-QA questions for a single uploaded paper.

Dependencies: All task modules, paper_analyzer.core.rag_qa, configs
System role: Pipeline orchestration (coordinates only)
"""

import asyncio
import logging
import time
from collections.abc import Awaitable

from fastapi.concurrency import run_in_threadpool
from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel

from paper_analyzer.configs.analysis import AnalysisSettings
from paper_analyzer.core.document_processing.tasks import (
    ChunkingTask,
    DocumentIndex,
    ParsingTask,
    VectorIndexTask,
)
from paper_analyzer.core.rag_qa import RetrievalQAChain, build_questions
from paper_analyzer.models.analysis import AnalysisResult

logger = logging.getLogger(__name__)


async def gather_all_or_nothing(calls: dict[str, Awaitable[str]]) -> dict[str, str]:
    """
    Run awaitables concurrently; fail fast on the first exception.

    Pending calls are cancelled as soon as one fails, and the failure is
    re-raised. Results keep the key order of ``calls``.

    Args:
        calls: Awaitables keyed by result name

    Returns:
        dict[str, str]: Results keyed like ``calls``

    Raises:
        Exception: The first failure among the calls
    """
    tasks = {key: asyncio.ensure_future(call) for key, call in calls.items()}
    try:
        done, pending = await asyncio.wait(
            tasks.values(), return_when=asyncio.FIRST_EXCEPTION
        )
        errors = [
            task.exception()
            for task in tasks.values()
            if task in done and task.exception() is not None
        ]
        if errors:
            raise errors[0]
        return {key: task.result() for key, task in tasks.items()}
    finally:
        unfinished = [task for task in tasks.values() if not task.done()]
        for task in unfinished:
            task.cancel()
        if unfinished:
            await asyncio.gather(*unfinished, return_exceptions=True)


class AnalysisPipeline:
    """Orchestrate paper analysis: parse -> chunk -> embed+index -> 5x QA."""

    def __init__(
        self,
        embeddings: Embeddings,
        model: BaseChatModel,
        settings: AnalysisSettings | None = None,
    ) -> None:
        """
        Initialize pipeline with providers and configuration.

        Args:
            embeddings: Embedding provider for chunks and queries
            model: Chat model for answering questions
            settings: Analysis settings (uses defaults if None)
        """
        self._settings = settings or AnalysisSettings()
        self._model = model

        self._parsing_task = ParsingTask()
        self._chunking_task = ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
        )
        self._vector_index_task = VectorIndexTask(embeddings)

    def build_index(self, content: bytes, file_name: str) -> DocumentIndex:
        """
        Load, chunk, and index one PDF. Blocking; call from a worker thread.

        Args:
            content: Raw PDF bytes
            file_name: Original file name

        Returns:
            DocumentIndex: Fresh index owned by this analysis

        Raises:
            ParsingError: PDF could not be loaded
            EmbeddingError: Chunk embedding failed
            VectorStoreError: Nothing to index
        """
        pages = self._parsing_task.parse_bytes(content, file_name)
        chunks = self._chunking_task.chunk(pages)
        logger.info(
            "Chunked document",
            extra={"file_name": file_name, "page_count": len(pages), "chunk_count": len(chunks)},
        )
        return self._vector_index_task.build(chunks)

    async def analyze(
        self,
        content: bytes,
        topic: str,
        file_name: str = "document.pdf",
    ) -> AnalysisResult:
        """
        Produce the five-part summary of one paper.

        All five questions share one index and run concurrently. If any of
        them fails, the others are cancelled and the failure propagates; no
        partial result is returned.

        Args:
            content: Raw PDF bytes
            topic: Research topic for the relevance question
            file_name: Original file name

        Returns:
            AnalysisResult: Summary fields plus file name

        Raises:
            ParsingError: PDF could not be loaded
            EmbeddingError: Chunk embedding failed
            VectorStoreError: Nothing to index
            AnalysisError: A question could not be answered
        """
        start_time = time.perf_counter()
        logger.info(f"{__name__}:analyze - START file_name={file_name}, size={len(content)}")

        index = await run_in_threadpool(self.build_index, content, file_name)

        chain = RetrievalQAChain(index, self._model, k=self._settings.retriever_k)
        questions = build_questions(topic)
        answers = await gather_all_or_nothing(
            {field: chain.ainvoke(question) for field, question in questions.items()}
        )

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:analyze - END file_name={file_name}",
            extra={"file_name": file_name, "processing_time_ms": round(elapsed_ms, 2)},
        )
        return AnalysisResult(file_name=file_name, **answers)
