"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<PREFIX>_<FIELD>`` environment variables.

    ``_validate`` runs after construction, whichever loader built the
    instance, so invalid values never reach a transport.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None: ...

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """``env_key("url")`` is ``"FTSEARCH_URL"`` for the ``FTSEARCH`` prefix."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")


__all__ = ["Settings"]
