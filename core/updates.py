# =============================================================================
# core/updates.py  —  Latest CSS Updates via OpenRouter
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Asks a web-aware model (Perplexity Sonar, reached through OpenRouter's
#   chat-completions API) for a short summary of recent CSS developments and
#   returns the prose.
#
# WHY OPENROUTER?
#   One API key and one base URL for many providers.  The model string is
#   configurable, so switching to another web-search-capable model is a
#   settings change, not a code change.
#
# FAILURE POLICY:
#   Any problem (HTTP error status, network failure, non-JSON body, missing
#   choices[0].message.content) raises UpstreamError.  There is no retry and
#   no fallback text: if the agent asked for news and we have none, it must
#   know that rather than receive something invented.
# =============================================================================

import json
import logging
import urllib.error
import urllib.request
from typing import Optional

from core.errors import NotConfigured, UpstreamError

logger = logging.getLogger(__name__)

OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"

SYSTEM_INSTRUCTION = (
    "You are an AI assistant specialized in finding the latest CSS news and "
    "updates. Summarize the key recent developments concisely."
)
USER_QUERY = (
    "What are the most important recent updates or newly released features in "
    "CSS? Focus on things developers should be aware of in the last few months."
)


class UpdateFetcher:
    """Fetches a prose summary of recent CSS news from a chat-completion API."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "perplexity/sonar-pro",
        timeout: float = 60.0,
        url: str = OPENROUTER_URL,
        site_url: Optional[str] = None,
        app_title: Optional[str] = None,
    ):
        if not api_key:
            raise NotConfigured("OPENROUTER_API_KEY is not set; cannot fetch updates.")
        self._api_key = api_key
        self.model = model
        self.timeout = timeout
        self.url = url
        self.site_url = site_url
        self.app_title = app_title

    def _build_request(self) -> urllib.request.Request:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        # Optional attribution headers shown on OpenRouter's dashboards.
        if self.site_url:
            headers["HTTP-Referer"] = self.site_url
        if self.app_title:
            headers["X-Title"] = self.app_title

        body = json.dumps({
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_INSTRUCTION},
                {"role": "user", "content": USER_QUERY},
            ],
        }).encode("utf-8")
        return urllib.request.Request(self.url, data=body, headers=headers, method="POST")

    def fetch(self) -> str:
        """Return the assistant's summary text.

        Raises:
            UpstreamError: non-2xx status, network failure, unparsable body,
                or no message content in the first choice.
        """
        request = self._build_request()
        logger.info("Requesting CSS updates from %s (model=%s)", self.url, self.model)

        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                raw = response.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            detail = e.read().decode("utf-8", errors="replace") if e.fp else ""
            logger.error("OpenRouter returned %s %s: %s", e.code, e.reason, detail)
            raise UpstreamError(
                f"OpenRouter API request failed: {e.code} {e.reason} - {detail}"
            ) from e
        except urllib.error.URLError as e:
            logger.error("OpenRouter request failed: %s", e.reason)
            raise UpstreamError(f"OpenRouter API request failed: {e.reason}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("OpenRouter returned a non-JSON body: %.200s", raw)
            raise UpstreamError("OpenRouter returned a response that is not JSON.") from e

        content = extract_message_content(data)
        if not content:
            logger.error("Invalid response structure from OpenRouter: %.500s", raw)
            raise UpstreamError("Could not extract assistant message from OpenRouter response.")
        return content


def extract_message_content(data) -> Optional[str]:
    """Pull choices[0].message.content out of a chat-completion payload.

    Returns None for any shape that does not carry a non-empty string there.
    """
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if isinstance(content, str) and content.strip():
        return content
    return None
