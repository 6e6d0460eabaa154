"""Backend configuration page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from gui.views.base import BaseView, FormField


def _fields() -> List[FormField]:
    return [
        FormField("endpoint", "Endpoint", "Enter your endpoint for Supabase project"),
        FormField("anon_key", "Anonymous Key", "Enter your anonymous key for Supabase project"),
    ]


@dataclass
class ConfigView(BaseView):
    name: str = "config"
    title: str = "Config"
    fields: List[FormField] = field(default_factory=_fields)
    submit_text: str = "Save"
