"""Protocol – keyword table, command kinds and reply decoding."""
from mp_ftsearch.protocol.command import DIALECT_COMMANDS, Command, CommandBuilder, CommandKind
from mp_ftsearch.protocol.decoder import decode_reply
from mp_ftsearch.protocol.keywords import Keyword, SortOrder

__all__ = [
    "Command",
    "CommandBuilder",
    "CommandKind",
    "DIALECT_COMMANDS",
    "Keyword",
    "SortOrder",
    "decode_reply",
]
