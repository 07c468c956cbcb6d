"""Profanity filter backed by the APILayer bad-words API.

The API takes the raw text as the request body and answers with a JSON
document whose ``censored_content`` field holds the masked text.
"""

import httpx
import logfire

from qna.config import ProfanitySettings
from qna.domain.error import ProfanityServiceError
from qna.domain.service.profanity import ProfanityFilter


class ApiLayerProfanityFilter(ProfanityFilter):
    """Profanity filter calling the APILayer bad-words endpoint.

    Transient connection failures are retried by the transport.
    """

    def __init__(
        self,
        settings: ProfanitySettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the filter.

        Args:
            settings: Profanity API settings (key, URL, retries)
            transport: Optional transport override, used by tests
        """
        if not settings.api_key:
            raise ValueError("ApiLayerProfanityFilter requires an API key")

        self.settings = settings
        self._client = httpx.AsyncClient(
            transport=transport or httpx.AsyncHTTPTransport(retries=settings.retries),
            timeout=settings.timeout,
            headers={"apikey": settings.api_key},
        )

    async def censor(self, text: str) -> str:
        """Censor text through the remote API.

        Raises:
            ProfanityServiceError: On HTTP errors or an unexpected response
        """
        with logfire.span("profanity_filter.censor", length=len(text)):
            try:
                response = await self._client.post(
                    self.settings.base_url,
                    params={"censor_character": self.settings.censor_character},
                    content=text.encode("utf-8"),
                )
            except httpx.HTTPError as e:
                logfire.error("Profanity API request failed", error=str(e))
                raise ProfanityServiceError(f"Profanity service unavailable: {e}") from e

            if response.status_code != 200:
                logfire.error(
                    "Profanity API returned an error",
                    status_code=response.status_code,
                    error=response.text,
                )
                raise ProfanityServiceError(
                    f"Profanity service error: {response.status_code}"
                )

            try:
                result = response.json()
                censored = result["censored_content"]
            except (ValueError, KeyError, TypeError) as e:
                raise ProfanityServiceError(
                    f"Unexpected profanity service response: {e}"
                ) from e

            if not isinstance(censored, str):
                raise ProfanityServiceError(
                    "Unexpected profanity service response: censored_content is not text"
                )

            if censored != text:
                logfire.info("Profanity censored", bad_words=result.get("bad_words_total"))
            return censored

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()


class PassthroughProfanityFilter(ProfanityFilter):
    """Local profanity filter that returns text unchanged.

    Used when no API key is configured and in tests.
    """

    async def censor(self, text: str) -> str:
        return text
