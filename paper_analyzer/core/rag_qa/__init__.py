"""
Retrieval-augmented question answering.

Exports: RetrievalQAChain, build_questions, QA_PROMPT
"""

from .qa_chain import RetrievalQAChain
from .qa_prompt import QA_PROMPT
from .questions import build_questions

__all__ = ["RetrievalQAChain", "QA_PROMPT", "build_questions"]
