from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict


class Tab(str, Enum):
    DISCUSSION = "discussion"
    CHATBOT = "chatbot"
    RESOURCES = "resources"
    HELP = "help"


class NavItem(BaseModel):
    tab: Tab
    label: str
    icon: str

    model_config = ConfigDict(frozen=True)


class NavEntry(NavItem):
    is_active: bool


class NavigationResponse(BaseModel):
    active_tab: Tab
    items: List[NavEntry]
