from fastapi import APIRouter, Depends

from ....gateway.service import AIGateway, get_gateway
from ....models.support import (
    QuizFeedbackRequest,
    QuizFeedbackResponse,
    SupportiveReplyRequest,
    SupportiveReplyResponse,
)

router = APIRouter(prefix="/support", tags=["support"])


@router.post("/reply", response_model=SupportiveReplyResponse)
async def supportive_reply(body: SupportiveReplyRequest, gateway: AIGateway = Depends(get_gateway)):
    reply = await gateway.generate_supportive_reply(body.post_content)
    return {"reply": reply}


@router.post("/quiz-feedback", response_model=QuizFeedbackResponse)
async def quiz_feedback(body: QuizFeedbackRequest, gateway: AIGateway = Depends(get_gateway)):
    feedback = await gateway.get_quiz_feedback(body.score)
    return {"feedback": feedback}
