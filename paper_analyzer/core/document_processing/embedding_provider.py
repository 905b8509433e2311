"""
Hosted model providers.

Builds the Google Generative AI embedding and chat clients used by the
pipeline. Both are returned behind LangChain's generic interfaces so tests
can substitute fakes.

Dependencies: langchain_google_genai
System role: Embedding and chat model construction
"""

import logging

from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI, GoogleGenerativeAIEmbeddings

from paper_analyzer.configs.analysis import AnalysisSettings

logger = logging.getLogger(__name__)


def build_embeddings(settings: AnalysisSettings, api_key: str) -> Embeddings:
    """
    Create the Gemini embedding client.

    Args:
        settings: Analysis settings (embedding model ID)
        api_key: Google API key

    Returns:
        Embeddings: Embedding provider for chunks and queries
    """
    logger.info(f"{__name__}:build_embeddings - model={settings.embedding_model}")
    return GoogleGenerativeAIEmbeddings(
        model=settings.embedding_model,
        google_api_key=api_key or None,
    )


def build_chat_model(settings: AnalysisSettings, api_key: str) -> BaseChatModel:
    """
    Create the Gemini chat client.

    Args:
        settings: Analysis settings (chat model ID, temperature)
        api_key: Google API key

    Returns:
        BaseChatModel: Chat model answering retrieval-QA prompts
    """
    logger.info(
        f"{__name__}:build_chat_model - model={settings.chat_model}, "
        f"temperature={settings.temperature}"
    )
    return ChatGoogleGenerativeAI(
        model=settings.chat_model,
        temperature=settings.temperature,
        google_api_key=api_key or None,
    )
