"""Protocol – CommandKind and the built Command."""
from __future__ import annotations

import dataclasses
from enum import StrEnum
from typing import Callable, TypeAlias

from mp_ftsearch.kernel.types import WireValue
from mp_ftsearch.protocol.keywords import Keyword


class CommandKind(StrEnum):
    """Wire names of the search commands.  Multi-word names are sent word by word."""

    FT_AGGREGATE = "FT.AGGREGATE"
    FT_ALIASADD = "FT.ALIASADD"
    FT_ALIASDEL = "FT.ALIASDEL"
    FT_ALIASUPDATE = "FT.ALIASUPDATE"
    FT_ALTER = "FT.ALTER"
    FT_CONFIG_GET = "FT.CONFIG GET"
    FT_CONFIG_SET = "FT.CONFIG SET"
    FT_CREATE = "FT.CREATE"
    FT_CURSOR_DEL = "FT.CURSOR DEL"
    FT_CURSOR_READ = "FT.CURSOR READ"
    FT_DICTADD = "FT.DICTADD"
    FT_DICTDEL = "FT.DICTDEL"
    FT_DICTDUMP = "FT.DICTDUMP"
    FT_DROPINDEX = "FT.DROPINDEX"
    FT_EXPLAIN = "FT.EXPLAIN"
    FT_INFO = "FT.INFO"
    FT_LIST = "FT._LIST"
    FT_SEARCH = "FT.SEARCH"
    FT_SPELLCHECK = "FT.SPELLCHECK"
    FT_SUGADD = "FT.SUGADD"
    FT_SUGDEL = "FT.SUGDEL"
    FT_SUGGET = "FT.SUGGET"
    FT_SUGLEN = "FT.SUGLEN"
    FT_SYNDUMP = "FT.SYNDUMP"
    FT_SYNUPDATE = "FT.SYNUPDATE"
    FT_TAGVALS = "FT.TAGVALS"

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(self.value.split(" "))


#: Commands whose grammar ends with an optional ``DIALECT d``.
DIALECT_COMMANDS: frozenset[CommandKind] = frozenset(
    {
        CommandKind.FT_AGGREGATE,
        CommandKind.FT_EXPLAIN,
        CommandKind.FT_SEARCH,
        CommandKind.FT_SPELLCHECK,
    }
)


@dataclasses.dataclass(frozen=True)
class Command:
    """A fully built command: kind plus its ordered argument tokens.

    ``dialect`` records the dialect the builder emitted, if any, so a
    transport can decide whether to append a default one.
    """

    kind: CommandKind
    args: tuple[WireValue, ...]
    dialect: int | None = None

    @property
    def accepts_dialect(self) -> bool:
        return self.kind in DIALECT_COMMANDS

    def with_dialect(self, dialect: int) -> "Command":
        """Return a copy with ``DIALECT dialect`` appended."""
        return dataclasses.replace(
            self,
            args=(*self.args, Keyword.DIALECT, dialect),
            dialect=dialect,
        )

    def to_wire(self) -> tuple[WireValue, ...]:
        """Command words followed by arguments, ready for ``execute_command``."""
        return (*self.kind.words, *self.args)


CommandBuilder: TypeAlias = Callable[[], Command]

__all__ = ["Command", "CommandBuilder", "CommandKind", "DIALECT_COMMANDS"]
