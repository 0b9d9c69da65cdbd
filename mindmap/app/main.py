# mindmap/app/main.py
from __future__ import annotations

import logging
import os
import tkinter as tk
from tkinter import ttk
from typing import Dict, Optional

# ---- Views (UI-only) ----
from .views.auth_views import LoginView, SignupView
from .views.view_manager import ViewManager
from .views.workspace_views import LoggedInView, MindMapView

from ..adapters.settings_local import SettingsLocal
from ..domain.screens import ScreenId
from ..utils import logging as logging_utils
from .composition import AppGraph, compose_app
from .settings import AppSettings

logging_utils.configure_root()


class App:
    """Bootstrap: compose the use-case graph and bind it to Tk views."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)

        # ---- Settings ----
        self._settings_root = os.environ.get("MINDMAP_SETTINGS_ROOT") or "."
        self._settings_store = SettingsLocal(root_dir=self._settings_root)
        self.settings = self._load_user_settings()

        # ---- Use cases, presenters, view models ----
        self.graph: AppGraph = compose_app(self.settings)
        vms = self.graph.view_models
        controllers = self.graph.controllers

        # ---- Window & screens ----
        self.win = tk.Tk()
        self.win.title(self.settings.window_title)
        self.win.geometry("480x360")
        container = ttk.Frame(self.win)
        container.pack(fill="both", expand=True)
        self.view_manager = ViewManager(container, vms.navigation)

        self.view_manager.add_view(
            ScreenId.SIGNUP,
            SignupView(
                container,
                vms.signup,
                on_signup=controllers.signup.execute,
                on_switch_to_login=controllers.signup.switch_to_login_view,
            ),
        )
        self.view_manager.add_view(
            ScreenId.LOGIN,
            LoginView(
                container,
                vms.login,
                on_login=controllers.login.execute,
                on_switch_to_signup=controllers.login.switch_to_signup_view,
            ),
        )
        self.view_manager.add_view(
            ScreenId.LOGGED_IN,
            LoggedInView(
                container,
                vms.logged_in,
                on_change_password=controllers.change_password.execute,
                on_logout=controllers.logout.execute,
                on_open_mind_map=self.graph.screens.open_mind_map,
            ),
        )
        self.view_manager.add_view(
            ScreenId.MIND_MAP,
            MindMapView(container, vms.mind_map, on_back=self.graph.screens.close_mind_map),
        )

        # Initial screen
        vms.navigation.notify()

    def _load_user_settings(self) -> AppSettings:
        settings = AppSettings.defaults()
        payload: Optional[Dict] = None
        try:
            payload = self._settings_store.load_user_settings()
        except (OSError, ValueError) as exc:
            self._log.warning("Could not load settings: %s", exc)
        if payload is not None:
            try:
                settings = settings.apply_dict(payload)
            except ValueError as exc:
                self._log.warning("Ignoring invalid settings: %s", exc)
        level = logging_utils.apply_debug_setting(settings.debug_logging)
        self._log.debug("Effective log level: %s", logging.getLevelName(level))
        return settings


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
