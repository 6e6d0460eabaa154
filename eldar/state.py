"""In-memory cache of the last loaded or saved records.

The process owns a single AppState for its lifetime. Repositories replace its
fields after every successful load, save or clear, so readers never see a
value older than the last committed write.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from eldar.models import Config, Credentials


@dataclass
class AppState:
    config: Config = field(default_factory=Config)
    credentials: Credentials = field(default_factory=Credentials)
