"""Base class for page views.

Views are headless descriptions of a page: which inputs it shows and which
actions it offers. The Tk shell turns them into widgets; tests inspect them
directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    placeholder: str = ""
    secret: bool = False


@dataclass(frozen=True)
class ViewAction:
    """A secondary button, e.g. "Register" on the login page."""

    name: str
    label: str
    prompt: str = ""


@dataclass
class BaseView:
    name: str = "base"
    title: str = ""
    fields: List[FormField] = field(default_factory=list)
    actions: List[ViewAction] = field(default_factory=list)
    submit_text: Optional[str] = None
    message: str = ""

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]
