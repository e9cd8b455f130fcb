"""
Scene illustration via an external image generation provider.

One provider contract is supported: the OpenAI Images API
(POST /v1/images/generations with a bearer token). Every prompt is wrapped
in a fixed children's-book style preamble before it leaves the process;
callers have no way to send a prompt without it.

There is no retry and no caching. Each call is exactly one HTTP request.
"""

import logging
from typing import Optional, Protocol, Union

import httpx

from storyworld.config import (
    IMAGE_CONSTANTS,
    ImageSize,
    get_image_api_url,
    get_image_model,
    get_image_timeout,
    parse_image_size,
)
from .errors import EmptyResult, MissingCredential, ProviderError

logger = logging.getLogger(__name__)

STYLE_PREAMBLE = (
    "Illustration for a children's storybook. Colorful, whimsical, child-appropriate "
    "and non-violent artwork with a simple composition and clear subjects."
)


def apply_style_preamble(prompt: str) -> str:
    """Prefix a scene prompt with the mandatory style and safety preamble."""
    return f"{STYLE_PREAMBLE} {prompt.strip()}"


class IllustrationProvider(Protocol):
    """Anything that can turn a scene prompt into an image reference."""

    async def request_illustration(
        self,
        prompt: str,
        credential: str,
        size: Union[str, ImageSize, None] = None,
    ) -> str:
        ...


def _extract_error_message(response: httpx.Response) -> Optional[str]:
    """Pull a human-readable message out of a provider error payload."""
    try:
        payload = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict):
        message = error.get("message")
    else:
        message = error or payload.get("message")
    return message if isinstance(message, str) and message.strip() else None


def extract_image_from_response(payload) -> str:
    """
    Extract the first image reference from an Images API response body.

    Args:
        payload: Decoded JSON body, expected as {"data": [{"url": ...}, ...]}

    Returns:
        Image URL (or a data URL when the provider returns base64)

    Raises:
        EmptyResult: If the body holds no image
        ProviderError: If the body is not shaped like an Images API response
    """
    if not isinstance(payload, dict):
        raise ProviderError("Unexpected response from the image service")
    data = payload.get("data")
    if data is None:
        raise EmptyResult()
    if not isinstance(data, list):
        raise ProviderError("Unexpected response from the image service")

    for item in data:
        if not isinstance(item, dict):
            continue
        if item.get("url"):
            return item["url"]
        if item.get("b64_json"):
            return f"data:image/png;base64,{item['b64_json']}"

    raise EmptyResult()


class OpenAIImageProvider:
    """
    Generate illustrations with the OpenAI Images API.

    The access token is passed per call, since it belongs to the user's
    session rather than to the process.
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.api_url = api_url or get_image_api_url()
        self.model = model or get_image_model()
        self.timeout = timeout if timeout is not None else get_image_timeout()

    def build_request_body(self, prompt: str, size: ImageSize) -> dict:
        return {
            "model": self.model,
            "prompt": apply_style_preamble(prompt),
            "n": IMAGE_CONSTANTS["images_per_request"],
            "size": size.value,
        }

    async def request_illustration(
        self,
        prompt: str,
        credential: str,
        size: Union[str, ImageSize, None] = None,
    ) -> str:
        """
        Request one illustration for a scene prompt.

        Args:
            prompt: The scene's image prompt (style preamble is added here)
            credential: The user's access token
            size: "WxH" size hint, defaults to square

        Returns:
            Reference to the generated image (URL)

        Raises:
            MissingCredential: If credential is blank (no request is made)
            ProviderError: On a non-success response, network failure or malformed body
            EmptyResult: If the provider succeeded but returned no image
        """
        token = (credential or "").strip()
        if not token:
            raise MissingCredential()

        image_size = parse_image_size(size)
        body = self.build_request_body(prompt, image_size)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.api_url,
                    json=body,
                    headers={"Authorization": f"Bearer {token}"},
                )
        except httpx.RequestError as e:
            logger.warning("Image request failed to reach provider: %s", type(e).__name__)
            raise ProviderError("Failed to connect to the image service") from e
        except (UnicodeEncodeError, httpx.InvalidURL) as e:
            logger.warning("Image request could not be built: %s", type(e).__name__)
            raise ProviderError("The image request could not be sent") from e

        if not 200 <= response.status_code < 300:
            message = _extract_error_message(response)
            logger.warning(
                "Image provider returned %s: %s", response.status_code, message or "no message"
            )
            raise ProviderError(message, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise ProviderError("Unexpected response from the image service") from e

        return extract_image_from_response(payload)
