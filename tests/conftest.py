"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory PDF builder, fake embedding and chat models, pipeline factory
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

from typing import Any, Callable

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.language_models import BaseChatModel, FakeListChatModel
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.outputs import ChatGeneration, ChatResult
from pydantic import Field

from paper_analyzer.configs import AnalysisSettings
from paper_analyzer.core.analysis_pipeline import AnalysisPipeline

PAGE_ONE = (
    "Graph Neural Networks for Molecule Property Prediction. "
    "Aim: we study message passing networks that predict chemical properties of molecules. "
    "Methods: we train a gated graph convolution model on the QM9 benchmark with ten random seeds."
)
PAGE_TWO = (
    "Results: the model reduces mean absolute error by twelve percent over the baseline. "
    "Limitations: experiments cover small organic molecules only and ignore 3D conformers. "
    "Scope: the work is restricted to supervised regression tasks."
)


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages: list[str]) -> bytes:
    """
    Build a minimal, valid PDF with one Helvetica text line per page.

    Args:
        pages: Text for each page (ASCII)

    Returns:
        bytes: PDF file content with a correct xref table
    """
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)

    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for page_id, text in zip(page_ids, pages):
        stream = f"BT /F1 10 Tf 36 740 Td ({_escape(text)}) Tj ET".encode()
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                "/Resources << /Font << /F1 3 0 R >> >> "
                f"/Contents {page_id + 1} 0 R >>"
            ).encode()
        )
        objects.append(
            f"<< /Length {len(stream)} >>\nstream\n".encode() + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    return bytes(out)


class RecordingChatModel(BaseChatModel):
    """Chat model fake that records questions and can fail on demand."""

    questions: list[str] = Field(default_factory=list)
    prompts: list[list[BaseMessage]] = Field(default_factory=list)
    fail_on: str | None = None

    @property
    def _llm_type(self) -> str:
        return "recording-fake"

    def _generate(self, messages: list[BaseMessage], stop: Any = None, run_manager: Any = None, **kwargs: Any) -> ChatResult:
        question = str(messages[-1].content)
        self.questions.append(question)
        self.prompts.append(messages)
        if self.fail_on and self.fail_on in question:
            raise RuntimeError("Resource has been exhausted (e.g. check quota).")
        return ChatResult(
            generations=[ChatGeneration(message=AIMessage(content=f"Answer: {question}"))]
        )


@pytest.fixture
def pdf_factory() -> Callable[[list[str]], bytes]:
    """Return the in-memory PDF builder."""
    return build_pdf


@pytest.fixture
def two_page_pdf() -> bytes:
    """Two-page research paper PDF."""
    return build_pdf([PAGE_ONE, PAGE_TWO])


@pytest.fixture
def fake_embeddings() -> DeterministicFakeEmbedding:
    """Deterministic embeddings (same text -> same vector)."""
    return DeterministicFakeEmbedding(size=16)


@pytest.fixture
def fake_chat_model() -> FakeListChatModel:
    """Chat model that always returns the same non-empty answer."""
    return FakeListChatModel(responses=["The paper addresses this directly."])


@pytest.fixture
def recording_chat_model() -> RecordingChatModel:
    """Chat model that records every question it receives."""
    return RecordingChatModel()


@pytest.fixture
def analysis_settings() -> AnalysisSettings:
    """Default analysis settings independent of the environment."""
    return AnalysisSettings(
        chunk_size=1000,
        chunk_overlap=200,
        retriever_k=4,
        embedding_model="models/gemini-embedding-001",
        chat_model="gemini-2.0-flash",
        temperature=0.0,
    )


@pytest.fixture
def make_pipeline(fake_embeddings, fake_chat_model, analysis_settings):
    """Factory building an AnalysisPipeline with fakes unless overridden."""

    def _make(embeddings=None, model=None) -> AnalysisPipeline:
        return AnalysisPipeline(
            embeddings=embeddings or fake_embeddings,
            model=model or fake_chat_model,
            settings=analysis_settings,
        )

    return _make
