"""
Analysis pipeline configuration settings.

Chunking, retrieval, and hosted model parameters for per-paper analysis.

Dependencies: pydantic, pydantic_settings
System role: Pipeline configuration for chunking, embedding, and QA
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalysisSettings(BaseSettings):
    """Settings for the paper analysis pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="ANALYSIS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=1000,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=200,
        description="Overlap between consecutive chunks",
    )

    # Retrieval settings
    retriever_k: int = Field(
        default=4,
        description="Number of chunks retrieved per question",
    )

    # Hosted model settings
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID",
    )
    chat_model: str = Field(
        default="gemini-2.0-flash",
        description="Google Gemini chat model ID",
    )
    temperature: float = Field(
        default=0.0,
        description="Model temperature (0.0 for minimal run-to-run variance)",
    )
