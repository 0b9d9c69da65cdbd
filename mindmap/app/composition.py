"""Object graph assembly for the desktop runtime.

``compose_app`` runs once at startup and returns an immutable ``AppGraph``.
Every presenter receives the same ``NavigationState`` instance; tests build
their own graph per test.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..adapters.session_memory import InMemorySession
from ..adapters.user_store_memory import InMemoryUserStore
from ..domain.entities import UserFactory
from ..domain.ports import SessionPort, UserStorePort
from ..usecases.change_password import ChangePasswordInteractor
from ..usecases.login import LoginInteractor
from ..usecases.logout import LogoutInteractor
from ..usecases.signup import SignupInteractor
from ..viewmodels.logged_in_vm import LoggedInViewModel
from ..viewmodels.login_vm import LoginViewModel
from ..viewmodels.mind_map_vm import MindMapViewModel
from ..viewmodels.navigation_vm import NavigationState
from ..viewmodels.signup_vm import SignupViewModel
from .change_password_presenter import ChangePasswordPresenter
from .controllers import (
    ChangePasswordController,
    LoginController,
    LogoutController,
    SignupController,
)
from .login_presenter import LoginPresenter
from .logout_presenter import LogoutPresenter
from .screen_switcher import ScreenSwitcher
from .settings import AppSettings
from .signup_presenter import SignupPresenter


@dataclass(frozen=True)
class ViewModels:
    navigation: NavigationState
    signup: SignupViewModel
    login: LoginViewModel
    logged_in: LoggedInViewModel
    mind_map: MindMapViewModel


@dataclass(frozen=True)
class Controllers:
    signup: SignupController
    login: LoginController
    change_password: ChangePasswordController
    logout: LogoutController


@dataclass(frozen=True)
class AppGraph:
    """Fully wired application; views only need ``view_models`` and ``controllers``."""

    settings: AppSettings
    user_store: UserStorePort
    session: SessionPort
    view_models: ViewModels
    controllers: Controllers
    screens: ScreenSwitcher


def compose_app(
    settings: Optional[AppSettings] = None,
    *,
    user_store: Optional[UserStorePort] = None,
    session: Optional[SessionPort] = None,
    user_factory: Optional[UserFactory] = None,
) -> AppGraph:
    """Build view models, presenters, interactors and controllers.

    Args:
        settings: Runtime settings; defaults are used when omitted.
        user_store: Store port; a fresh ``InMemoryUserStore`` when omitted.
        session: Session port; a fresh ``InMemorySession`` when omitted.
        user_factory: Factory for new users, injectable for a pinned clock.

    Returns:
        AppGraph: Value object holding every wired collaborator.
    """
    settings = settings or AppSettings.defaults()
    user_store = user_store if user_store is not None else InMemoryUserStore()
    session = session if session is not None else InMemorySession()
    user_factory = user_factory or UserFactory()

    # ---- ViewModels ----
    vms = ViewModels(
        navigation=NavigationState(settings.initial_screen),
        signup=SignupViewModel(),
        login=LoginViewModel(),
        logged_in=LoggedInViewModel(),
        mind_map=MindMapViewModel(),
    )

    # ---- Presenters ----
    signup_presenter = SignupPresenter(
        navigation=vms.navigation,
        signup_vm=vms.signup,
        logged_in_vm=vms.logged_in,
        login_vm=vms.login,
    )
    login_presenter = LoginPresenter(
        navigation=vms.navigation,
        login_vm=vms.login,
        logged_in_vm=vms.logged_in,
        signup_vm=vms.signup,
    )
    change_password_presenter = ChangePasswordPresenter(logged_in_vm=vms.logged_in)
    logout_presenter = LogoutPresenter(
        navigation=vms.navigation, logged_in_vm=vms.logged_in, login_vm=vms.login
    )

    # ---- UseCases & Controllers ----
    controllers = Controllers(
        signup=SignupController(
            SignupInteractor(
                user_store=user_store,
                presenter=signup_presenter,
                user_factory=user_factory,
                session=session,
            )
        ),
        login=LoginController(
            LoginInteractor(user_store=user_store, presenter=login_presenter, session=session)
        ),
        change_password=ChangePasswordController(
            ChangePasswordInteractor(
                user_store=user_store,
                presenter=change_password_presenter,
                policy=settings.password_policy(),
            )
        ),
        logout=LogoutController(LogoutInteractor(session=session, presenter=logout_presenter)),
    )

    screens = ScreenSwitcher(
        navigation=vms.navigation, logged_in_vm=vms.logged_in, mind_map_vm=vms.mind_map
    )
    return AppGraph(
        settings=settings,
        user_store=user_store,
        session=session,
        view_models=vms,
        controllers=controllers,
        screens=screens,
    )
