# proxy_core/errors.py
from proxy_core.models import ErrorOut


class ProxyError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.detail = ErrorOut(error=message).model_dump()


class UpstreamError(Exception):
    """Any failure talking to the chat-completion API. Never shown to callers."""


def err_method_not_allowed() -> ProxyError:
    return ProxyError(405, "Method Not Allowed")


def err_prompt_required() -> ProxyError:
    return ProxyError(400, "Prompt is required")


def err_api_key_missing() -> ProxyError:
    return ProxyError(500, "API key is not configured on the server.")


def err_internal() -> ProxyError:
    return ProxyError(500, "An internal server error occurred.")
