from pydantic import BaseModel, ConfigDict, Field


class SupportiveReplyRequest(BaseModel):
    post_content: str = Field(alias="postContent")

    model_config = ConfigDict(populate_by_name=True)


class SupportiveReplyResponse(BaseModel):
    reply: str


class QuizFeedbackRequest(BaseModel):
    # Higher means more stress.
    score: float = Field(ge=0.0, le=10.0)


class QuizFeedbackResponse(BaseModel):
    feedback: str
