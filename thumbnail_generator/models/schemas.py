from pydantic import BaseModel, ConfigDict, Field


class GenerationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    video_id: str = Field(..., alias="videoId", description="Video the thumbnail belongs to")
    prompt: str = Field(..., description="Text prompt for the image generator")
    webhook_url: str = Field(..., alias="webhookUrl", description="Callback the generator notifies when done")


class HealthResponse(BaseModel):
    status: str
