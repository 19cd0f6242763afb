"""
Framework-free request handling: method check, prompt validation, credential
lookup, one upstream call, and mapping of every outcome to a status + JSON body.
"""
import json
import logging
from typing import Any, Callable, Dict, NamedTuple, Optional, Union

from pydantic import ValidationError

from proxy_core import llm, settings
from proxy_core.errors import (
    ProxyError,
    err_api_key_missing,
    err_internal,
    err_method_not_allowed,
    err_prompt_required,
)
from proxy_core.models import ChatCompletionRequest, PromptIn, ProxyOut
from proxy_core.persona import SYSTEM_PROMPT

logger = logging.getLogger(__name__)

Sender = Callable[[ChatCompletionRequest, str], str]


class ProxyResult(NamedTuple):
    status_code: int
    body: Dict[str, Any]


def _parse_prompt(body: Union[bytes, str, None]) -> str:
    # json.loads, not pydantic's parser: lone surrogate escapes are valid JSON.
    try:
        prompt = PromptIn.model_validate(json.loads(body or b"")).prompt
    except (ValueError, UnicodeDecodeError, ValidationError):
        raise err_prompt_required()
    if not prompt:
        raise err_prompt_required()
    return prompt


class ProxyHandler:
    def __init__(
        self,
        send: Optional[Sender] = None,
        system_prompt: str = SYSTEM_PROMPT,
        api_key_lookup: Callable[[], Optional[str]] = settings.get_api_key,
    ):
        self.send = send or llm.send_chat_completion
        self.system_prompt = system_prompt
        self.api_key_lookup = api_key_lookup

    def handle(self, method: str, body: Union[bytes, str, None]) -> ProxyResult:
        try:
            return ProxyResult(200, self._run(method, body))
        except ProxyError as e:
            return ProxyResult(e.status_code, e.detail)

    def _run(self, method: str, body: Union[bytes, str, None]) -> Dict[str, Any]:
        if (method or "").upper() != "POST":
            raise err_method_not_allowed()

        prompt = _parse_prompt(body)

        api_key = self.api_key_lookup()
        if not api_key:
            raise err_api_key_missing()

        request = ChatCompletionRequest.for_prompt(self.system_prompt, prompt)
        try:
            reply = self.send(request, api_key)
            out = ProxyOut(response=reply)
        except Exception as e:
            logger.error("API Proxy Error: %s", e, exc_info=True)
            raise err_internal()

        return out.model_dump()
