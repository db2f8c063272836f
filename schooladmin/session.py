from __future__ import annotations

import logging
from typing import Optional

from .constants import ADMIN_EMAIL, ADMIN_PASSWORD
from .models import User

log = logging.getLogger(__name__)

ADMIN_USER = User(id="1", name="Admin User", email=ADMIN_EMAIL, role="admin")


class AppSession:
    """Who is signed in and how the window is themed.

    Sign-in is a mock: a single hard-coded admin account.
    """

    def __init__(self, user: Optional[User] = None, dark_mode: bool = False):
        self.user = user
        self.dark_mode = dark_mode

    @property
    def authenticated(self) -> bool:
        return self.user is not None

    def login(self, email: str, password: str) -> bool:
        if (email or "").strip().lower() == ADMIN_EMAIL and password == ADMIN_PASSWORD:
            self.user = User(id=ADMIN_USER.id, name=ADMIN_USER.name, email=ADMIN_USER.email, role=ADMIN_USER.role)
            log.info("login: %s", self.user.email)
            return True
        log.info("login rejected for %s", email)
        return False

    def logout(self) -> None:
        if self.user is not None:
            log.info("logout: %s", self.user.email)
        self.user = None

    def toggle_theme(self) -> bool:
        self.dark_mode = not self.dark_mode
        return self.dark_mode
