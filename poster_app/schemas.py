from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class ArtStyle(str, Enum):
    MINIMALIST = "minimalist"
    WATERCOLOR = "watercolor"
    POP_ART = "pop art"
    CYBERPUNK = "cyberpunk"
    ART_NOUVEAU = "art nouveau"
    VAPORWAVE = "vaporwave"
    STEAMPUNK = "steampunk"
    NOIR = "noir"


class ImageModel(str, Enum):
    DALL_E_3 = "dall-e-3"
    DALL_E_2 = "dall-e-2"


ART_STYLE_LABELS = {
    ArtStyle.MINIMALIST: "Minimalist",
    ArtStyle.WATERCOLOR: "Watercolor",
    ArtStyle.POP_ART: "Pop Art",
    ArtStyle.CYBERPUNK: "Cyberpunk",
    ArtStyle.ART_NOUVEAU: "Art Nouveau",
    ArtStyle.VAPORWAVE: "Vaporwave",
    ArtStyle.STEAMPUNK: "Steampunk",
    ArtStyle.NOIR: "Film Noir",
}

IMAGE_MODEL_LABELS = {
    ImageModel.DALL_E_3: "DALL-E 3 (Better quality, slower)",
    ImageModel.DALL_E_2: "DALL-E 2 (Faster, lower quality)",
}


class WorkflowState(str, Enum):
    IDLE = "idle"
    BUSY = "busy"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class Notification(BaseModel):
    kind: Literal["success", "error"]
    title: str
    description: str


class SharePayload(BaseModel):
    title: str
    text: str
    url: str


class FieldUpdate(BaseModel):
    field: Literal["title", "style", "model"]
    value: str

    @model_validator(mode="after")
    def check_closed_sets(self):
        if self.field == "style":
            ArtStyle(self.value)
        elif self.field == "model":
            ImageModel(self.value)
        return self


class CredentialUpdate(BaseModel):
    api_key: str


class Option(BaseModel):
    value: str
    label: str


class OptionsResponse(BaseModel):
    art_styles: list[Option]
    models: list[Option]


class PosterStatus(BaseModel):
    state: WorkflowState
    busy: bool
    title: str
    style: str
    model: str
    has_credential: bool
    image_url: str | None = None
    notification: Notification | None = None
    can_share: bool = False
    caption: str = Field(default="Your generated poster will appear here")


class ShareResponse(BaseModel):
    shared: bool


class ErrorResponse(BaseModel):
    detail: str
    poster: PosterStatus
