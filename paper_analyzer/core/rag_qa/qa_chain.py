"""
Retrieval-QA chain.

Answers a question about one paper by retrieving the top-k chunks from its
vector index and asking the chat model with those chunks as context.

Dependencies: langchain_core, paper_analyzer.core.document_processing
System role: Retrieval-augmented question answering
"""

import logging

from langchain_core.documents import Document
from langchain_core.language_models import BaseChatModel

from paper_analyzer.core.document_processing.tasks.vector_index_task import (
    DEFAULT_TOP_K,
    DocumentIndex,
)
from paper_analyzer.core.exceptions import AnalysisError
from paper_analyzer.core.rag_qa.qa_prompt import CONTEXT_SEPARATOR, QA_PROMPT

logger = logging.getLogger(__name__)


def message_text(content: str | list) -> str:
    """
    Flatten chat message content to plain text.

    Gemini may return content as a list of strings or {"text": ...} parts.
    """
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
            for item in content
        )
    return str(content)


class RetrievalQAChain:
    """Retrieve-then-answer chain over a single DocumentIndex."""

    def __init__(
        self,
        index: DocumentIndex,
        model: BaseChatModel,
        k: int = DEFAULT_TOP_K,
    ) -> None:
        """
        Initialize chain.

        Args:
            index: Vector index of the paper being analyzed
            model: Chat model (temperature 0 in production)
            k: Number of chunks retrieved per question
        """
        self._index = index
        self._model = model
        self._k = k

    @staticmethod
    def format_context(documents: list[Document]) -> str:
        """Join retrieved chunk text into one context block."""
        return CONTEXT_SEPARATOR.join(doc.page_content for doc in documents)

    async def ainvoke(self, question: str) -> str:
        """
        Answer a question from the paper's retrieved context.

        Args:
            question: Natural-language question

        Returns:
            str: Model answer text, verbatim

        Raises:
            AnalysisError: Retrieval, network, auth, or response failure
        """
        try:
            documents = await self._index.asearch(question, k=self._k)
            messages = QA_PROMPT.invoke(
                {
                    "context": self.format_context(documents),
                    "question": question,
                }
            ).to_messages()
            response = await self._model.ainvoke(messages)
        except Exception as e:
            raise AnalysisError(
                f"Retrieval QA failed: {type(e).__name__}: {e}",
                question=question,
            ) from e

        answer = message_text(response.content)
        logger.debug(
            "Answered question",
            extra={"question": question, "chunks": len(documents), "answer_len": len(answer)},
        )
        return answer
