"""
ViewManager
-----------
Stacks one frame per screen in a shared container and raises the frame whose
name matches the active screen id of the navigation state. UI-only.
"""
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import Dict

from ...domain.screens import ScreenId
from ...viewmodels.navigation_vm import NavigationState


class ViewManager:
    def __init__(self, container: ttk.Frame, navigation: NavigationState) -> None:
        self._log = logging.getLogger(__name__)
        self._container = container
        self._container.rowconfigure(0, weight=1)
        self._container.columnconfigure(0, weight=1)
        self._views: Dict[ScreenId, tk.Widget] = {}
        navigation.subscribe(self.on_screen_changed)

    def add_view(self, screen: ScreenId, view: tk.Widget) -> None:
        view.grid(row=0, column=0, sticky="nsew")
        self._views[screen] = view

    def on_screen_changed(self, screen: ScreenId) -> None:
        view = self._views.get(screen)
        if view is None:
            self._log.warning("No view registered for screen %s", screen.value)
            return
        view.tkraise()
