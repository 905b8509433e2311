"""
Sequential batch analysis for the UI.

Runs one analyze request per uploaded file, in upload order, and reports
the outcome through notifications. A single failed file aborts the batch
and discards results already collected for it.

Dependencies: paper_analyzer.ui.api_client
System role: Client-side upload state machine
"""

import enum
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from paper_analyzer.models.analysis import AnalysisResult
from paper_analyzer.observability.log_utils import log_with_context
from paper_analyzer.ui.api_client import AnalysisRequestError, AnalyzerClient

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"

TOPIC_REQUIRED = "Please enter your research topic"
FILES_REQUIRED = "Please upload at least one PDF file"
BATCH_FAILED = "An error occurred during analysis"
BATCH_SUCCEEDED = "Analysis completed successfully"


class BatchState(str, enum.Enum):
    """Lifecycle of one batch run."""

    IDLE = "idle"
    UPLOADING = "uploading"
    DONE = "done"
    FAILED = "failed"


class NotificationLevel(str, enum.Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """User-facing toast message."""

    title: str
    description: str
    level: NotificationLevel


@dataclass(frozen=True)
class PaperFile:
    """A file selected in the uploader."""

    name: str
    content: bytes
    mime_type: str = PDF_MIME_TYPE


@dataclass
class BatchOutcome:
    """Final state of a batch run and the results to display."""

    state: BatchState
    results: list[AnalysisResult] = field(default_factory=list)


def accept_pdf_files(files: Sequence[PaperFile]) -> list[PaperFile]:
    """Keep only PDF files, matching the uploader's accept filter."""
    return [
        f for f in files
        if f.mime_type == PDF_MIME_TYPE or f.name.lower().endswith(".pdf")
    ]


class BatchAnalyzer:
    """Idle -> Uploading(i) -> Done | Failed."""

    def __init__(
        self,
        client: AnalyzerClient,
        notify: Callable[[Notification], None],
    ) -> None:
        self._client = client
        self._notify = notify
        self.state = BatchState.IDLE
        self.current_index: int | None = None

    def _error(self, description: str) -> None:
        self._notify(Notification("Error", description, NotificationLevel.ERROR))

    def run(self, files: Sequence[PaperFile], topic: str) -> BatchOutcome:
        """
        Analyze every file sequentially.

        Args:
            files: Accepted PDF files in upload order
            topic: Research topic sent with every file

        Returns:
            BatchOutcome: DONE with one result per file, FAILED with no
                results, or IDLE when validation stopped the run
        """
        if not topic:
            self._error(TOPIC_REQUIRED)
            return BatchOutcome(state=BatchState.IDLE)

        if not files:
            self._error(FILES_REQUIRED)
            return BatchOutcome(state=BatchState.IDLE)

        self.state = BatchState.UPLOADING
        results: list[AnalysisResult] = []
        for i, paper in enumerate(files):
            self.current_index = i
            try:
                results.append(self._client.analyze_paper(paper.name, paper.content, topic))
            except AnalysisRequestError as e:
                log_with_context(
                    logger,
                    logging.WARNING,
                    "Batch aborted",
                    file_name=e.file_name,
                    index=i,
                    completed=len(results),
                    status_code=e.status_code,
                )
                self.state = BatchState.FAILED
                self.current_index = None
                self._error(BATCH_FAILED)
                return BatchOutcome(state=BatchState.FAILED)

        self.state = BatchState.DONE
        self.current_index = None
        self._notify(Notification("Success", BATCH_SUCCEEDED, NotificationLevel.SUCCESS))
        return BatchOutcome(state=BatchState.DONE, results=results)
