from .schemas import Config, Credentials

__all__ = ["Config", "Credentials"]
