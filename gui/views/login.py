"""Login page stub."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from gui.views.base import BaseView, FormField, ViewAction


@dataclass
class LoginView(BaseView):
    name: str = "login"
    title: str = "Login"
    fields: List[FormField] = field(
        default_factory=lambda: [
            FormField("email", "Email", "Enter your email address"),
            FormField("password", "Password", "Enter your password", secret=True),
        ]
    )
    actions: List[ViewAction] = field(
        default_factory=lambda: [
            ViewAction("register", "Register", prompt="Don't have an account yet?")
        ]
    )
    submit_text: str = "Login"
