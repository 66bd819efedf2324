"""Study API endpoints.

Routes:
- POST /study/generate - Generate diagram markup, summary and flashcards
- POST /study/ask - Answer a follow-up question from the re-sent context

Dependencies: backend.application.services.study_service
System role: Study content HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from backend.api.deps import get_study_service
from backend.api.routers.router_utils import handle_study_errors
from backend.application.services.study_service import StudyService
from backend.models.chat import AskRequest, AskResponse
from backend.models.generation import GenerateRequest
from backend.models.study import GeneratedContent

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/study", tags=["study"])


@router.post("/generate", response_model=GeneratedContent)
@handle_study_errors
async def generate(
    request: GenerateRequest,
    study_service: StudyService = Depends(get_study_service),
) -> GeneratedContent:
    """Generate study content from text and/or an uploaded document.

    Args:
        request: GenerateRequest with material and diagram category
        study_service: Injected StudyService

    Returns:
        GeneratedContent: Diagram markup, summary and flashcards

    Raises:
        HTTPException(400): No material supplied
        HTTPException(502): Service failure or malformed reply
        HTTPException(503): API key not configured
    """
    logger.info(
        f"{__name__}:generate - category={request.category.value}, "
        f"has_file={request.file is not None}"
    )
    return await study_service.generate_content(request.source(), request.category)


@router.post("/ask", response_model=AskResponse)
@handle_study_errors
async def ask(
    request: AskRequest,
    study_service: StudyService = Depends(get_study_service),
) -> AskResponse:
    """Answer a follow-up question grounded in the re-sent material and transcript.

    Args:
        request: AskRequest with question, prior transcript and source material
        study_service: Injected StudyService

    Returns:
        AskResponse: Assistant turn to append to the transcript

    Raises:
        HTTPException(400): Blank question
        HTTPException(502): Service failure
        HTTPException(503): API key not configured
    """
    turn = await study_service.answer_question(
        request.transcript, request.question, request.source()
    )
    return AskResponse(turn=turn)
