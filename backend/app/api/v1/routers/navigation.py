from fastapi import APIRouter

from ....models.navigation import NavigationResponse, Tab
from ....ui.navigation import render_navigation

router = APIRouter(prefix="/navigation", tags=["navigation"])


@router.get("", response_model=NavigationResponse)
async def navigation(active_tab: Tab = Tab.DISCUSSION):
    """Tab bar for the client shell; the client keeps track of the active tab."""
    return {"active_tab": active_tab, "items": render_navigation(active_tab)}
