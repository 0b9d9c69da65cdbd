"""ViewModel package for screen state and navigation.

Call context:
    ``mindmap.app.composition`` builds one instance of each view model and
    passes them to presenters (writers) and Tk views (subscribers).

Responsibilities:
    - Hold the mutable per-screen state dataclasses.
    - Notify subscribers synchronously, in registration order.
    - Keep I/O and business rules out of the screen layer.
"""

from .base import ViewModel
from .logged_in_vm import LoggedInState, LoggedInViewModel
from .login_vm import LoginState, LoginViewModel
from .mind_map_vm import MindMapState, MindMapViewModel
from .navigation_vm import NavigationState
from .signup_vm import SignupState, SignupViewModel

__all__ = [
    "LoggedInState",
    "LoggedInViewModel",
    "LoginState",
    "LoginViewModel",
    "MindMapState",
    "MindMapViewModel",
    "NavigationState",
    "SignupState",
    "SignupViewModel",
    "ViewModel",
]
