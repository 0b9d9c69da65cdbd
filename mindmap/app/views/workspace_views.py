"""
Logged-in and mind-map screens (Tkinter, UI-only).
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ...viewmodels.logged_in_vm import LoggedInState, LoggedInViewModel
from ...viewmodels.mind_map_vm import MindMapState, MindMapViewModel


class LoggedInView(ttk.Frame):
    OnChangePassword = Optional[Callable[[str, str], None]]
    OnUser = Optional[Callable[[str], None]]
    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        parent: tk.Widget,
        view_model: LoggedInViewModel,
        *,
        on_change_password: OnChangePassword = None,
        on_logout: OnUser = None,
        on_open_mind_map: OnVoid = None,
    ) -> None:
        super().__init__(parent, padding=16)
        self._view_model = view_model
        self._on_change_password = on_change_password
        self._on_logout = on_logout
        self._on_open_mind_map = on_open_mind_map
        self._username = ""

        self.welcome_var = tk.StringVar(value="")
        self.password_var = tk.StringVar(value="")
        self.error_var = tk.StringVar(value="")

        pad = dict(padx=4, pady=4)
        ttk.Label(self, text=view_model.TITLE_LABEL).grid(row=0, column=0, columnspan=3, **pad)
        ttk.Label(self, textvariable=self.welcome_var).grid(row=1, column=0, columnspan=3, **pad)
        ttk.Label(self, text="New password:").grid(row=2, column=0, sticky="w", **pad)
        ttk.Entry(self, textvariable=self.password_var, show="*").grid(
            row=2, column=1, columnspan=2, sticky="ew", **pad
        )
        ttk.Label(self, textvariable=self.error_var, foreground="red").grid(
            row=3, column=0, columnspan=3, **pad
        )
        ttk.Button(
            self, text=view_model.CHANGE_PASSWORD_BUTTON_LABEL, command=self._change_clicked
        ).grid(row=4, column=0, **pad)
        ttk.Button(
            self, text=view_model.OPEN_MIND_MAP_BUTTON_LABEL, command=self._open_clicked
        ).grid(row=4, column=1, **pad)
        ttk.Button(self, text=view_model.LOGOUT_BUTTON_LABEL, command=self._logout_clicked).grid(
            row=4, column=2, **pad
        )
        self.columnconfigure(1, weight=1)

        view_model.subscribe(self.render)

    def render(self, state: LoggedInState) -> None:
        self._username = state.username
        self.welcome_var.set(f"Signed in as {state.username}" if state.username else "")
        self.password_var.set(state.password)
        self.error_var.set(state.error or "")

    def _change_clicked(self) -> None:
        state = self._view_model.get_state()
        state.password = self.password_var.get()
        self._view_model.set_state(state)
        if self._on_change_password:
            self._on_change_password(self._username, self.password_var.get())

    def _logout_clicked(self) -> None:
        if self._on_logout:
            self._on_logout(self._username)

    def _open_clicked(self) -> None:
        if self._on_open_mind_map:
            self._on_open_mind_map()


class MindMapView(ttk.Frame):
    """Workspace canvas with the central topic node."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        parent: tk.Widget,
        view_model: MindMapViewModel,
        *,
        on_back: OnVoid = None,
    ) -> None:
        super().__init__(parent, padding=8)
        self._on_back = on_back
        self.title_var = tk.StringVar(value="")

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)
        header = ttk.Frame(self)
        header.grid(row=0, column=0, sticky="ew")
        ttk.Label(header, textvariable=self.title_var).pack(side="left")
        ttk.Button(header, text=view_model.BACK_BUTTON_LABEL, command=self._back_clicked).pack(
            side="right"
        )
        self.canvas = tk.Canvas(self, background="white", highlightthickness=0)
        self.canvas.grid(row=1, column=0, sticky="nsew", pady=(8, 0))
        self.canvas.bind("<Configure>", lambda e: self._draw_root())

        view_model.subscribe(self.render)

    def render(self, state: MindMapState) -> None:
        self.title_var.set(state.title)
        self._draw_root()

    def _draw_root(self) -> None:
        self.canvas.delete("all")
        width = self.canvas.winfo_width() or 400
        height = self.canvas.winfo_height() or 300
        cx, cy = width // 2, height // 2
        self.canvas.create_oval(cx - 70, cy - 30, cx + 70, cy + 30, fill="#e8f0fe", outline="#4a6fa5")
        self.canvas.create_text(cx, cy, text=self.title_var.get() or "Central topic")

    def _back_clicked(self) -> None:
        if self._on_back:
            self._on_back()
