"""
Paper analysis API endpoint.

Routes: POST /analyze

Dependencies: fastapi, paper_analyzer.core.analysis_pipeline, paper_analyzer.models
System role: Paper analysis HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile

from paper_analyzer.api.deps import ServiceCache, get_service_cache, get_settings_dependency
from paper_analyzer.api.routers.error_handling import (
    VALIDATION_MESSAGE,
    handle_analysis_errors,
)
from paper_analyzer.configs import Settings
from paper_analyzer.core.exceptions import UploadTooLargeError, ValidationError
from paper_analyzer.models import ErrorResponse, PaperSummary
from paper_analyzer.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])


@router.post(
    "/analyze",
    response_model=PaperSummary,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@handle_analysis_errors
async def analyze_paper(
    file: UploadFile | None = File(default=None),
    topic: str | None = Form(default=None),
    cache: ServiceCache = Depends(get_service_cache),
    settings: Settings = Depends(get_settings_dependency),
) -> PaperSummary:
    """
    Analyze one uploaded research paper against a research topic.

    Args:
        file: PDF upload (multipart form)
        topic: Research topic (form field)
        cache: Injected service cache holding the analysis pipeline
        settings: Injected application settings

    Returns:
        PaperSummary: aim, methodology, results, scope, relevance

    Error responses:
        400: file or topic missing or empty
        413: file exceeds the upload limit
        500: any processing failure (detail logged, not returned)
    """
    if file is None or not topic or not topic.strip():
        raise ValidationError(VALIDATION_MESSAGE, field="file" if file is None else "topic")

    content = await file.read()
    if not content:
        raise ValidationError(VALIDATION_MESSAGE, field="file")

    if len(content) > settings.max_upload_bytes:
        raise UploadTooLargeError(len(content), settings.max_upload_bytes)

    file_name = file.filename or "document.pdf"
    log_with_context(
        logger,
        logging.INFO,
        "Analysis request received",
        file_name=file_name,
        size_bytes=len(content),
        topic_len=len(topic),
    )

    result = await cache.analysis_pipeline.analyze(content, topic, file_name=file_name)
    return result.to_summary()
