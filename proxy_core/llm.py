import logging

import requests

from proxy_core import settings
from proxy_core.errors import UpstreamError
from proxy_core.models import ChatCompletionRequest

logger = logging.getLogger(__name__)


def send_chat_completion(request: ChatCompletionRequest, api_key: str) -> str:
    """
    request: the full chat payload (model, messages, temperature, max_tokens)
    api_key: bearer credential for the upstream API
    returns: text of the first choice

    Every failure (transport, non-2xx, bad payload) surfaces as UpstreamError.
    """
    url = f"{settings.BASE_URL.rstrip('/')}/chat/completions"
    headers = {"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"}
    try:
        r = requests.post(
            url, json=request.model_dump(), headers=headers, timeout=settings.REQUEST_TIMEOUT
        )
        r.raise_for_status()
        data = r.json()
    except requests.exceptions.RequestException as e:
        raise UpstreamError(f"request to {url} failed: {e}") from e
    except ValueError as e:
        raise UpstreamError(f"upstream returned non-JSON body: {e}") from e

    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise UpstreamError(f"unexpected completion payload: {data!r}") from e
    if not isinstance(content, str):
        raise UpstreamError(f"completion content is not text: {content!r}")

    logger.debug("Upstream %s returned %d chars", request.model, len(content))
    return content
