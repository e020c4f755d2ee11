from fastapi import APIRouter, Depends

from ....gateway.service import AIGateway, get_gateway
from ....models.moderation import ModerationRequest, ModerationResult

router = APIRouter(prefix="/moderation", tags=["moderation"])


@router.post("", response_model=ModerationResult)
async def moderate(body: ModerationRequest, gateway: AIGateway = Depends(get_gateway)):
    """
    Check a post before it is published. Always 200: failures come back as a
    non-positive, non-severe verdict.
    """
    return await gateway.moderate_content(body.content)
