from thumbnail_generator.models.schemas import GenerationRequest
from thumbnail_generator.services.freepik_service import FreepikService


async def handle_generate(request: GenerationRequest, forwarder: FreepikService) -> str:
    return await forwarder.generate_image(request.video_id, request.prompt, request.webhook_url)
