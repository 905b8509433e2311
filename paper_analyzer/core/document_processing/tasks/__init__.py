"""
Task modules for the paper analysis pipeline.

Exports: ParsingTask, ChunkingTask, VectorIndexTask, DocumentIndex
"""

from .chunking_task import ChunkingTask
from .parsing_task import ParsingTask
from .vector_index_task import DocumentIndex, VectorIndexTask

__all__ = [
    "ParsingTask",
    "ChunkingTask",
    "VectorIndexTask",
    "DocumentIndex",
]
