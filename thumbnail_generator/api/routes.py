import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from thumbnail_generator.models.schemas import GenerationRequest, HealthResponse
from thumbnail_generator.services import thumbnail_service
from thumbnail_generator.services.freepik_client import NetworkFailure, UpstreamError
from thumbnail_generator.services.freepik_service import FreepikService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def get_freepik_service(request: Request) -> FreepikService:
    return request.app.state.freepik_service


@router.post("/thumbnail/generate", response_class=PlainTextResponse)
async def generate_thumbnail(
    payload: GenerationRequest,
    freepik_service: FreepikService = Depends(get_freepik_service),
):
    for name, value in (("videoId", payload.video_id), ("prompt", payload.prompt), ("webhookUrl", payload.webhook_url)):
        if not value.strip():
            raise HTTPException(status_code=400, detail=f"{name} cannot be empty.")

    try:
        body = await thumbnail_service.handle_generate(payload, freepik_service)
    except NetworkFailure as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except UpstreamError as exc:
        raise HTTPException(
            status_code=502,
            detail={"message": str(exc), "upstream_status": exc.status_code, "upstream_body": exc.body},
        ) from exc

    return PlainTextResponse(body)


@router.get("/health", response_model=HealthResponse)
def health_check():
    return HealthResponse(status="ok")
