from enum import Enum

from google.genai import types

DEFAULT_MODEL = "gemini-2.5-flash"


MODERATION_SYSTEM = (
    "You are a content moderator for a teen mental health support app called ZenVibe. "
    "Your primary goal is to ensure all content is positive, supportive, and safe. "
    "The content must not contain bullying, hate speech, self-harm encouragement, explicit negativity, "
    "dismissive language, or anything unsafe for teens. "
    "Crucially, you must identify content that suggests an immediate risk. "
    "If a user explicitly mentions plans, methods, or a strong, immediate intent to harm themselves "
    "or someone else, you MUST set isSevere to true. "
    "Vague expressions of sadness or frustration are not severe. "
    "Your response must conform to the provided JSON schema."
)

MODERATION_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "isPositive": types.Schema(
            type=types.Type.BOOLEAN,
            description="True if the content is positive, supportive, and safe for a teen audience. False otherwise.",
        ),
        "reason": types.Schema(
            type=types.Type.STRING,
            description=(
                "If not positive, provide a brief, gentle, non-judgmental explanation for why the content "
                "is not suitable. If positive, provide a short affirmation."
            ),
        ),
        "isSevere": types.Schema(
            type=types.Type.BOOLEAN,
            description=(
                "True ONLY if the content explicitly discusses immediate plans, methods, or strong intent "
                "for self-harm or harming others. False for general sadness or non-threatening negativity."
            ),
        ),
    },
    required=["isPositive", "reason", "isSevere"],
)

PEER_SYSTEM = (
    "You are a supportive teen on the ZenVibe app. Your tone is like a peer: warm, caring, and positive, "
    "but not overly formal or robotic. Use emojis naturally."
)

AURA_SYSTEM = (
    "You are Aura, an AI friend on the ZenVibe app. Your tone is warm, caring, and positive. "
    "You do not give advice."
)


class QuizBand(str, Enum):
    HIGH = "high"
    MID = "mid"
    LOW = "low"


_BAND_TONE = {
    QuizBand.HIGH: "Their stress is high, so be extra gentle and focus on acknowledging their struggle.",
    QuizBand.MID: "Their stress is mid-range, so be encouraging about the journey they are on.",
    QuizBand.LOW: "Their stress is low, so be celebratory and positive about their low stress level.",
}


def quiz_band(score: float) -> QuizBand:
    """Above 7 is high, 4 through 7 inclusive is mid, under 4 is low."""
    if score > 7:
        return QuizBand.HIGH
    if score >= 4:
        return QuizBand.MID
    return QuizBand.LOW


def moderation_prompt(content: str) -> str:
    return f'Analyze the following text: "{content}"'


def supportive_reply_prompt(post_content: str) -> str:
    return (
        f'A teen posted this on a peer support app: "{post_content}". '
        "Write a short (2-3 sentences), empathetic, and supportive reply. "
        "The reply should validate their feelings and offer encouragement. Do not give advice."
    )


def quiz_feedback_prompt(score: float) -> str:
    return (
        f"A teen in a mental wellness app just scored {score:.1f} out of 10 on their initial stress level quiz. "
        "A higher score indicates higher stress. "
        "Write a short, encouraging, and non-clinical message (1-2 sentences) for them. "
        "The tone should be warm, supportive, and empathetic, like an AI friend named Aura. "
        + _BAND_TONE[quiz_band(score)]
    )


def moderation_config() -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        system_instruction=MODERATION_SYSTEM,
        response_mime_type="application/json",
        response_schema=MODERATION_SCHEMA,
    )


def text_config(system_instruction: str) -> types.GenerateContentConfig:
    return types.GenerateContentConfig(system_instruction=system_instruction)
