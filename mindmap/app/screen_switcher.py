"""Navigation actions that run no domain logic.

The logged-in screen opens the mind-map workspace and the workspace returns
to the logged-in screen. Both go through the shared ``NavigationState``.
"""

from __future__ import annotations

from ..domain.screens import ScreenId
from ..viewmodels.logged_in_vm import LoggedInViewModel
from ..viewmodels.mind_map_vm import MindMapState, MindMapViewModel
from ..viewmodels.navigation_vm import NavigationState


class ScreenSwitcher:
    def __init__(
        self,
        *,
        navigation: NavigationState,
        logged_in_vm: LoggedInViewModel,
        mind_map_vm: MindMapViewModel,
    ) -> None:
        self.navigation = navigation
        self.logged_in_vm = logged_in_vm
        self.mind_map_vm = mind_map_vm

    def open_mind_map(self) -> None:
        """Show the mind map owned by the logged-in user."""
        owner = self.logged_in_vm.get_state().username
        state = MindMapState(owner=owner)
        state.title = state.default_title()
        self.mind_map_vm.set_state(state)
        self.mind_map_vm.notify()
        self.navigation.navigate_to(ScreenId.MIND_MAP)

    def close_mind_map(self) -> None:
        self.navigation.navigate_to(ScreenId.LOGGED_IN)
