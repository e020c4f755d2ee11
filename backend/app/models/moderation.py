from pydantic import BaseModel, ConfigDict, Field


class ModerationResult(BaseModel):
    """Verdict for one piece of user-submitted text.

    Serialized with the camelCase names the client expects
    (``isPositive``, ``reason``, ``isSevere``). Validation is strict so that
    model output such as ``"true"`` or ``1`` is rejected rather than coerced.
    Only the camelCase names are accepted on input, so a reply using
    ``is_positive`` or ``is_severe`` fails validation.
    """

    is_positive: bool = Field(alias="isPositive")
    reason: str
    # Explicit, immediate intent to harm self or others. Never set for general sadness.
    is_severe: bool = Field(alias="isSevere")

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        frozen=True,
    )


class ModerationRequest(BaseModel):
    content: str
