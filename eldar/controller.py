from __future__ import annotations

from typing import Optional

from eldar.api import DatabaseHTTPClient
from eldar.config import Settings, get_settings
from eldar.errors import RepositoryError
from eldar.models import Config, Credentials
from eldar.navigation import AppPage, NavigationController, NavState, Resolution
from eldar.paths import database_path
from eldar.state import AppState
from eldar.storage import BUCKETS, ConfigRepository, CredentialRepository, KeyValueStore
from eldar.utils.logger import get_logger

logger = get_logger(__name__)


class AppController:
    """
    UI-agnostic orchestration layer.

    Owns:
      - the open store (for the whole process lifetime)
      - the AppState cache
      - config / credential repositories
      - the current navigation state

    UI should:
      - call controller methods
      - render the page named by current_page() / request_page()
      - show RepositoryError messages and stay on the current page
    """

    def __init__(self, store: KeyValueStore, *, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.state = AppState()
        self.nav = NavState()

        self._store = store
        self._config = ConfigRepository(store, self.state)
        self._credentials = CredentialRepository(store, self.state)
        self._navigation = NavigationController(self.state, reload=self.reload)

    @classmethod
    def start(cls, settings: Optional[Settings] = None) -> "AppController":
        """Open the store, create buckets and load AppState.

        DirectoryUnavailableError / StoreOpenError / BucketCreateError
        propagate; the caller treats them as fatal.
        """
        settings = settings or get_settings()
        path = database_path(settings)
        store = KeyValueStore.open(path)
        try:
            for bucket in BUCKETS:
                store.ensure_bucket(bucket)
        except Exception:
            store.close()
            raise

        controller = cls(store, settings=settings)
        controller.reload()
        logger.info("Store ready at %s", path)
        return controller

    @property
    def store(self) -> KeyValueStore:
        return self._store

    # -------------------------
    # State / persistence
    # -------------------------

    def reload(self) -> None:
        """Refresh AppState; a failed load leaves that record empty."""
        try:
            self._config.load()
        except RepositoryError as exc:
            logger.error("Error loading config: %s", exc)
            self.state.config = Config()
        try:
            self._credentials.load()
        except RepositoryError as exc:
            logger.error("Error loading credentials: %s", exc)
            self.state.credentials = Credentials()

    def load_config(self) -> Config:
        return self._config.load()

    def save_config(self, endpoint: str, anon_key: str) -> Config:
        return self._config.save(endpoint, anon_key)

    def load_credentials(self) -> Credentials:
        return self._credentials.load()

    def save_credentials(self, username: str, access_token: str, refresh_token: str) -> Credentials:
        return self._credentials.save(username, access_token, refresh_token)

    def clear_credentials(self) -> bool:
        return self._credentials.clear()

    # -------------------------
    # Navigation
    # -------------------------

    def _keep(self, resolution: Resolution) -> Resolution:
        if resolution.ok:
            self.nav = resolution.state
        else:
            logger.error("Navigation failed: %s", resolution.error)
        return resolution

    def current_page(self) -> Resolution:
        return self._keep(self._navigation.current_page(self.nav))

    def request_page(self, page: AppPage) -> Resolution:
        return self._keep(self._navigation.request_page(page))

    # -------------------------
    # API
    # -------------------------

    def api_client(self) -> Optional[DatabaseHTTPClient]:
        config = self.state.config
        if not config.is_complete:
            return None
        client = DatabaseHTTPClient.from_config(config, timeout=self.settings.api_timeout)
        client.access_token = self.state.credentials.access_token or None
        client.user_email = self.state.credentials.username or None
        return client

    def close(self) -> None:
        self._store.close()
