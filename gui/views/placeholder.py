"""Pages that exist in navigation but have no content yet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from gui.views.base import BaseView, ViewAction


def _sign_out() -> List[ViewAction]:
    return [ViewAction("sign_out", "Sign out")]


@dataclass
class BoardsView(BaseView):
    name: str = "boards"
    title: str = "Boards"
    message: str = "TODO"
    actions: List[ViewAction] = field(default_factory=_sign_out)


@dataclass
class GroupView(BaseView):
    name: str = "group"
    title: str = "Group"
    message: str = "TODO"
    actions: List[ViewAction] = field(default_factory=_sign_out)


@dataclass
class UsersView(BaseView):
    name: str = "users"
    title: str = "Users"
    message: str = "TODO"
    actions: List[ViewAction] = field(default_factory=_sign_out)
