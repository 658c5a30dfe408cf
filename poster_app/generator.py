import logging
import re

import openai

from .errors import RequestError
from .schemas import SharePayload

logger = logging.getLogger(__name__)


def build_prompt(title: str, style: str) -> str:
    return (
        f'An imaginative poster inspired by the movie "{title.strip()}" '
        f"rendered in the {style} art style"
    )


def poster_filename(title: str) -> str:
    """Turn a movie title into the file name offered for download."""
    slug = re.sub(r"\s+", "-", title).lower()
    return f"{slug}-poster.png"


def poster_caption(title: str, style: str) -> str:
    return f'Generated poster for "{title}" in {style} style'


def build_share_payload(title: str, style: str, url: str) -> SharePayload:
    return SharePayload(
        title=f"AI Movie Poster: {title}",
        text=f'Check out this AI-generated movie poster for "{title}" in {style} style!',
        url=url,
    )


def default_client_factory(api_key: str) -> openai.AsyncOpenAI:
    return openai.AsyncOpenAI(api_key=api_key)


async def call_image_api(client, model: str, prompt: str):
    logger.debug("Requesting image from %s", model)
    try:
        return await client.images.generate(model=model, prompt=prompt)
    except openai.OpenAIError as exc:
        raise RequestError(f"Image request failed: {exc}") from exc


def extract_image_url(response) -> str:
    """
    Pull the URL of the first generated image out of the API response.

    Raises RequestError when the list is missing or empty, or the first
    descriptor carries no URL.
    """
    data = getattr(response, "data", None)
    if not data:
        raise RequestError("Image response contained no images")
    url = getattr(data[0], "url", None)
    if not url:
        raise RequestError("First image descriptor has no URL")
    return url
