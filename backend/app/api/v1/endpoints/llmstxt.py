"""
llms.txt generation endpoint.
"""
from fastapi import APIRouter, Depends

from app.schemas.llmstxt_request import GenerateRequest
from app.schemas.llmstxt_result import ErrorResponse, GenerateResponse
from app.services.llmstxt_generator import LlmsTxtGenerator

router = APIRouter(tags=["llms.txt"])


def get_generator() -> LlmsTxtGenerator:
    """Generator wired to the process settings."""
    return LlmsTxtGenerator()


@router.post(
    "",
    response_model=GenerateResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def generate_llmstxt(request: GenerateRequest, generator: LlmsTxtGenerator = Depends(get_generator)):
    """Generate llms.txt and llms-full.txt for a list of pages."""
    return await generator.run(request)
