from __future__ import annotations
from dataclasses import dataclass

from ..domain.screens import ScreenId
from .base import ViewModel


@dataclass
class MindMapState:
    owner: str = ""
    title: str = ""

    def default_title(self) -> str:
        return f"{self.owner}'s mind map" if self.owner else "Untitled mind map"


class MindMapViewModel(ViewModel[MindMapState]):
    BACK_BUTTON_LABEL = "Back"

    def __init__(self) -> None:
        super().__init__(ScreenId.MIND_MAP.value, MindMapState())
