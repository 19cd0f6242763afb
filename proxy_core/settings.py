# proxy_core/settings.py
import os
from typing import Optional

BASE_URL = "https://api.opentyphoon.ai/v1"
MODEL = "typhoon-v2.5-30b-a3b-instruct"
TEMPERATURE = 0.7
MAX_TOKENS = 8192
REQUEST_TIMEOUT = 60  # seconds

API_KEY_ENV = "TYPHOON_API_KEY"


def get_api_key() -> Optional[str]:
    """
    Read the upstream key on every call so a missing or rotated secret is
    picked up without a redeploy. Empty string counts as missing.
    """
    return os.environ.get(API_KEY_ENV) or None
