"""
Signup and login screens (Tkinter, UI-only).

Buttons forward raw field values to injected callbacks; state changes arrive
through the view model subscription and are rendered by ``render``.
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ...viewmodels.login_vm import LoginState, LoginViewModel
from ...viewmodels.signup_vm import SignupState, SignupViewModel


class SignupView(ttk.Frame):
    OnSignup = Optional[Callable[[str, str, str], None]]
    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        parent: tk.Widget,
        view_model: SignupViewModel,
        *,
        on_signup: OnSignup = None,
        on_switch_to_login: OnVoid = None,
    ) -> None:
        super().__init__(parent, padding=16)
        self._view_model = view_model
        self._on_signup = on_signup
        self._on_switch_to_login = on_switch_to_login

        self.username_var = tk.StringVar(value="")
        self.password_var = tk.StringVar(value="")
        self.repeat_var = tk.StringVar(value="")
        self.error_var = tk.StringVar(value="")

        pad = dict(padx=4, pady=4)
        ttk.Label(self, text=view_model.TITLE_LABEL).grid(row=0, column=0, columnspan=2, **pad)
        ttk.Label(self, text="Username:").grid(row=1, column=0, sticky="w", **pad)
        ttk.Entry(self, textvariable=self.username_var).grid(row=1, column=1, sticky="ew", **pad)
        ttk.Label(self, text="Password:").grid(row=2, column=0, sticky="w", **pad)
        ttk.Entry(self, textvariable=self.password_var, show="*").grid(row=2, column=1, sticky="ew", **pad)
        ttk.Label(self, text="Repeat password:").grid(row=3, column=0, sticky="w", **pad)
        ttk.Entry(self, textvariable=self.repeat_var, show="*").grid(row=3, column=1, sticky="ew", **pad)
        ttk.Label(self, textvariable=self.error_var, foreground="red").grid(
            row=4, column=0, columnspan=2, **pad
        )
        ttk.Button(self, text=view_model.SIGNUP_BUTTON_LABEL, command=self._signup_clicked).grid(
            row=5, column=0, **pad
        )
        ttk.Button(
            self, text=view_model.TO_LOGIN_BUTTON_LABEL, command=self._switch_clicked
        ).grid(row=5, column=1, **pad)
        self.columnconfigure(1, weight=1)

        view_model.subscribe(self.render)

    def render(self, state: SignupState) -> None:
        self.username_var.set(state.username)
        self.password_var.set(state.password)
        self.repeat_var.set(state.repeat_password)
        self.error_var.set(state.error or "")

    def _signup_clicked(self) -> None:
        state = self._view_model.get_state()
        state.username = self.username_var.get()
        state.password = self.password_var.get()
        state.repeat_password = self.repeat_var.get()
        self._view_model.set_state(state)
        if self._on_signup:
            self._on_signup(self.username_var.get(), self.password_var.get(), self.repeat_var.get())

    def _switch_clicked(self) -> None:
        if self._on_switch_to_login:
            self._on_switch_to_login()


class LoginView(ttk.Frame):
    OnLogin = Optional[Callable[[str, str], None]]
    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        parent: tk.Widget,
        view_model: LoginViewModel,
        *,
        on_login: OnLogin = None,
        on_switch_to_signup: OnVoid = None,
    ) -> None:
        super().__init__(parent, padding=16)
        self._view_model = view_model
        self._on_login = on_login
        self._on_switch_to_signup = on_switch_to_signup

        self.username_var = tk.StringVar(value="")
        self.password_var = tk.StringVar(value="")
        self.error_var = tk.StringVar(value="")

        pad = dict(padx=4, pady=4)
        ttk.Label(self, text=view_model.TITLE_LABEL).grid(row=0, column=0, columnspan=2, **pad)
        ttk.Label(self, text="Username:").grid(row=1, column=0, sticky="w", **pad)
        ttk.Entry(self, textvariable=self.username_var).grid(row=1, column=1, sticky="ew", **pad)
        ttk.Label(self, text="Password:").grid(row=2, column=0, sticky="w", **pad)
        ttk.Entry(self, textvariable=self.password_var, show="*").grid(row=2, column=1, sticky="ew", **pad)
        ttk.Label(self, textvariable=self.error_var, foreground="red").grid(
            row=3, column=0, columnspan=2, **pad
        )
        ttk.Button(self, text=view_model.LOGIN_BUTTON_LABEL, command=self._login_clicked).grid(
            row=4, column=0, **pad
        )
        ttk.Button(
            self, text=view_model.TO_SIGNUP_BUTTON_LABEL, command=self._switch_clicked
        ).grid(row=4, column=1, **pad)
        self.columnconfigure(1, weight=1)

        view_model.subscribe(self.render)

    def render(self, state: LoginState) -> None:
        self.username_var.set(state.username)
        self.password_var.set(state.password)
        self.error_var.set(state.error or "")

    def _login_clicked(self) -> None:
        state = self._view_model.get_state()
        state.username = self.username_var.get()
        state.password = self.password_var.get()
        self._view_model.set_state(state)
        if self._on_login:
            self._on_login(self.username_var.get(), self.password_var.get())

    def _switch_clicked(self) -> None:
        if self._on_switch_to_signup:
            self._on_switch_to_signup()
