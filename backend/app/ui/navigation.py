from dataclasses import dataclass
from typing import Callable, List, Tuple, Union

from ..models.navigation import NavEntry, NavItem, Tab

NAV_ITEMS: Tuple[NavItem, ...] = (
    NavItem(tab=Tab.DISCUSSION, label="Discuss", icon="chat-bubble"),
    NavItem(tab=Tab.CHATBOT, label="Friend Chat", icon="sparkles"),
    NavItem(tab=Tab.RESOURCES, label="Resources", icon="book-open"),
    NavItem(tab=Tab.HELP, label="Help", icon="life-buoy"),
)


def render_navigation(active_tab: Union[Tab, str]) -> List[NavEntry]:
    active = Tab(active_tab)
    return [NavEntry(**item.model_dump(), is_active=item.tab == active) for item in NAV_ITEMS]


@dataclass(frozen=True)
class Navigation:
    """Bottom tab bar. Stateless: the active tab belongs to the caller."""

    active_tab: Tab
    on_select: Callable[[Tab], None]

    def items(self) -> List[NavEntry]:
        return render_navigation(self.active_tab)

    def select(self, tab: Union[Tab, str]) -> None:
        self.on_select(Tab(tab))


@dataclass
class ShellController:
    """Owns the active tab for one session."""

    active_tab: Tab = Tab.DISCUSSION

    def set_active_tab(self, tab: Tab) -> None:
        self.active_tab = tab

    def navigation(self) -> Navigation:
        return Navigation(active_tab=self.active_tab, on_select=self.set_active_tab)
