import logging

from fastapi import Request

from ..models.moderation import ModerationResult
from . import prompts
from .handle import Available, GatewayHandle

logger = logging.getLogger(__name__)


MODERATION_UNAVAILABLE = ModerationResult(
    isPositive=False,
    reason="Moderation service is currently unavailable.",
    isSevere=False,
)
MODERATION_FAILED = ModerationResult(
    isPositive=False,
    reason="Could not check your message at this time. Please try again later.",
    isSevere=False,
)
REPLY_FALLBACK = "Thanks for sharing. It takes courage to open up, and you're not alone in feeling this way."
QUIZ_FEEDBACK_FALLBACK = (
    "Thank you for sharing how you feel. Remember that every step, big or small, is part of your journey."
)


def strip_wrapping_quotes(text: str) -> str:
    """Trim whitespace and drop one pair of double quotes wrapping the whole text."""
    out = text.strip()
    if len(out) >= 2 and out.startswith('"') and out.endswith('"'):
        out = out[1:-1]
    return out


class AIGateway:
    """Facade over the Gemini API for moderation and supportive text.

    Each public coroutine makes at most one outbound call and never raises:
    an unavailable handle or any failure during the call returns the
    operation's fixed fallback instead.
    """

    def __init__(self, handle: GatewayHandle, model: str = prompts.DEFAULT_MODEL):
        self.handle = handle
        self.model = model

    @property
    def available(self) -> bool:
        return self.handle.is_available

    async def _generate(self, contents: str, config) -> str:
        if not isinstance(self.handle, Available):
            raise RuntimeError(f"Gemini client unavailable: {self.handle.reason}")
        response = await self.handle.client.aio.models.generate_content(
            model=self.model,
            contents=contents,
            config=config,
        )
        text = response.text
        if not text or not text.strip():
            raise RuntimeError("Gemini returned empty content")
        return text

    async def moderate_content(self, content: str) -> ModerationResult:
        if not self.available:
            return MODERATION_UNAVAILABLE
        try:
            raw = await self._generate(prompts.moderation_prompt(content), prompts.moderation_config())
            return ModerationResult.model_validate_json(raw.strip())
        except Exception:
            logger.error("Error moderating content", exc_info=True)
            return MODERATION_FAILED

    async def generate_supportive_reply(self, post_content: str) -> str:
        if not self.available:
            return REPLY_FALLBACK
        try:
            raw = await self._generate(
                prompts.supportive_reply_prompt(post_content),
                prompts.text_config(prompts.PEER_SYSTEM),
            )
            return strip_wrapping_quotes(raw) or REPLY_FALLBACK
        except Exception:
            logger.error("Error generating supportive reply", exc_info=True)
            return REPLY_FALLBACK

    async def get_quiz_feedback(self, score: float) -> str:
        if not self.available:
            return QUIZ_FEEDBACK_FALLBACK
        try:
            raw = await self._generate(
                prompts.quiz_feedback_prompt(score),
                prompts.text_config(prompts.AURA_SYSTEM),
            )
            return strip_wrapping_quotes(raw) or QUIZ_FEEDBACK_FALLBACK
        except Exception:
            logger.error("Error generating quiz feedback", exc_info=True)
            return QUIZ_FEEDBACK_FALLBACK


def get_gateway(request: Request) -> AIGateway:
    """FastAPI dependency: the gateway built once in the app lifespan."""
    return request.app.state.gateway
