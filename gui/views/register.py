"""Registration page stub."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from gui.views.base import BaseView, FormField


@dataclass
class RegisterView(BaseView):
    name: str = "register"
    title: str = "Register"
    fields: List[FormField] = field(
        default_factory=lambda: [
            FormField("email", "Email", "Enter your email address"),
            FormField("password", "Password", "Enter your password", secret=True),
            FormField("confirm", "Confirm Password", "Confirm your password", secret=True),
        ]
    )
    submit_text: str = "Register"
