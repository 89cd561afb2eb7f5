import logging
from typing import Any, Dict, Optional

import httpx

from thumbnail_generator.config import FreepikConfig
from thumbnail_generator.services.freepik_client import (
    API_KEY_HEADER,
    NetworkFailure,
    UpstreamError,
    create_http_client,
)

logger = logging.getLogger(__name__)

PROMPT_UPSAMPLING = False
SEED = 123
ASPECT_RATIO = "widescreen_16_9"
SAFETY_TOLERANCE = 2
OUTPUT_FORMAT = "jpeg"


def build_payload(prompt: str, webhook_url: str) -> Dict[str, Any]:
    return {
        "prompt": prompt,
        "prompt_upsampling": PROMPT_UPSAMPLING,
        "seed": SEED,
        "aspect_ratio": ASPECT_RATIO,
        "safety_tolerance": SAFETY_TOLERANCE,
        "output_format": OUTPUT_FORMAT,
        "webhook_url": webhook_url,
    }


class FreepikService:
    """Forwards thumbnail prompts to Freepik and relays the raw response body.

    The HTTP client is shared by every in-flight request. When one is not
    supplied the service creates its own on first use and closes it in
    :meth:`aclose`.
    """

    def __init__(self, config: FreepikConfig, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self._owns_client = client is None
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = create_http_client(self.config)
        return self._client

    async def generate_image(self, video_id: str, prompt: str, webhook_url: str) -> str:
        logger.info(
            "New thumbnail generation request received - videoId: %s, prompt: '%s', webhookUrl: %s",
            video_id,
            prompt,
            webhook_url,
        )
        payload = build_payload(prompt, webhook_url)

        try:
            response = await self.client.post(
                self.config.api_url,
                json=payload,
                headers={API_KEY_HEADER: self.config.api_key, "Content-Type": "application/json"},
                timeout=self.config.timeout_seconds,
            )
        except httpx.RequestError as exc:
            logger.exception("Failed to reach Freepik for video %s", video_id)
            raise NetworkFailure(f"Unable to reach image generation API: {exc}") from exc

        if response.is_error:
            logger.error(
                "Freepik rejected thumbnail request for video %s with status %s: %s",
                video_id,
                response.status_code,
                response.text,
            )
            raise UpstreamError(
                f"Image generation API returned status {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        logger.info("Freepik accepted thumbnail request for video %s", video_id)
        return response.text

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
