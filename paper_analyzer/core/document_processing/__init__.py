"""
Document processing for paper analysis.

Parsing, chunking, and in-memory vector indexing of uploaded PDFs, plus the
hosted embedding and chat model factories.

Dependencies: langchain_community, langchain_text_splitters, langchain_google_genai
System role: Document ingestion stages used by the analysis pipeline
"""

from .tasks import ChunkingTask, DocumentIndex, ParsingTask, VectorIndexTask

__all__ = [
    "ParsingTask",
    "ChunkingTask",
    "VectorIndexTask",
    "DocumentIndex",
]
