import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from google import genai

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unavailable:
    reason: str

    @property
    def is_available(self) -> bool:
        return False


@dataclass(frozen=True)
class Available:
    client: Any

    @property
    def is_available(self) -> bool:
        return True


GatewayHandle = Union[Unavailable, Available]


def _mask(key: str) -> str:
    return f"{key[:4]}...{key[-4:]}" if len(key) > 12 else "***"


def build_gateway_handle(
    api_key: Optional[str],
    client_factory: Callable[..., Any] = genai.Client,
) -> GatewayHandle:
    """Build the process-wide Gemini client handle.

    Never raises: a missing key or a client that fails to construct both
    yield ``Unavailable`` and every gateway operation then serves its fallback.
    """
    key = (api_key or "").strip()
    if not key:
        logger.error("CRITICAL: API_KEY environment variable not set. ZenVibe's AI features will be disabled.")
        return Unavailable("missing_api_key")

    try:
        client = client_factory(api_key=key)
    except Exception:
        logger.error("Failed to initialize Gemini client, AI features will be disabled.", exc_info=True)
        return Unavailable("client_init_failed")

    logger.info("Gemini client initialized (key %s)", _mask(key))
    return Available(client)
