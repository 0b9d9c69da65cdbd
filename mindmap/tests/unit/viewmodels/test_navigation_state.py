from __future__ import annotations

from typing import List

import pytest

from mindmap.domain.screens import ScreenId
from mindmap.viewmodels.navigation_vm import NavigationState


def test_initial_screen_is_signup() -> None:
    assert NavigationState().active_screen is ScreenId.SIGNUP


def test_navigate_to_sets_and_notifies() -> None:
    nav = NavigationState()
    seen: List[ScreenId] = []
    nav.subscribe(seen.append)

    nav.navigate_to(ScreenId.LOGIN)

    assert nav.active_screen is ScreenId.LOGIN
    assert seen == [ScreenId.LOGIN]


def test_instances_are_independent() -> None:
    first, second = NavigationState(), NavigationState()
    first.navigate_to(ScreenId.LOGGED_IN)
    assert second.active_screen is ScreenId.SIGNUP


@pytest.mark.parametrize(
    "raw, expected",
    [("login", ScreenId.LOGIN), ("LOGGED_IN", ScreenId.LOGGED_IN), (ScreenId.MIND_MAP, ScreenId.MIND_MAP)],
)
def test_screen_id_parse(raw, expected) -> None:
    assert ScreenId.parse(raw) is expected


def test_screen_id_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        ScreenId.parse("settings")
