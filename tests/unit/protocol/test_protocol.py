"""Unit tests for the protocol layer – keywords, Command and decode_reply."""

from __future__ import annotations

import pytest

from mp_ftsearch.kernel.errors import CommandError, ReplyDecodeError
from mp_ftsearch.protocol import Command, CommandKind, Keyword, SortOrder, decode_reply


class TestKeyword:
    def test_keywords_are_their_literals(self) -> None:
        assert Keyword.GROUPBY == "GROUPBY"
        assert Keyword.RETURN == "RETURN"
        assert Keyword.ALL == "*"

    def test_sort_order(self) -> None:
        assert [SortOrder.ASC, SortOrder.DESC] == ["ASC", "DESC"]


class TestCommandKind:
    def test_single_word(self) -> None:
        assert CommandKind.FT_SEARCH.words == ("FT.SEARCH",)

    def test_multi_word(self) -> None:
        assert CommandKind.FT_CONFIG_GET.words == ("FT.CONFIG", "GET")
        assert CommandKind.FT_CURSOR_READ.words == ("FT.CURSOR", "READ")

    def test_list_uses_internal_name(self) -> None:
        assert CommandKind.FT_LIST.value == "FT._LIST"


class TestCommand:
    def test_to_wire(self) -> None:
        cmd = Command(CommandKind.FT_CURSOR_DEL, ("idx", 42))
        assert cmd.to_wire() == ("FT.CURSOR", "DEL", "idx", 42)

    def test_accepts_dialect(self) -> None:
        assert Command(CommandKind.FT_SEARCH, ()).accepts_dialect
        assert Command(CommandKind.FT_EXPLAIN, ()).accepts_dialect
        assert not Command(CommandKind.FT_INFO, ()).accepts_dialect

    def test_with_dialect_appends_trailing_pair(self) -> None:
        cmd = Command(CommandKind.FT_SEARCH, ("idx", "*")).with_dialect(2)
        assert cmd.args == ("idx", "*", "DIALECT", 2)
        assert cmd.dialect == 2


class TestDecodeReply:
    def test_scalars_pass_through(self) -> None:
        assert decode_reply(None) is None
        assert decode_reply(3) == 3
        assert decode_reply(1.5) == 1.5
        assert decode_reply("OK") == "OK"

    def test_utf8_bytes_become_text(self) -> None:
        assert decode_reply(b"caf\xc3\xa9") == "café"

    def test_binary_bytes_stay_bytes(self) -> None:
        assert decode_reply(b"\xff\xfe") == b"\xff\xfe"

    def test_nested_arrays(self) -> None:
        frame = [2, b"doc:1", [b"title", b"hello"], (b"doc:2",)]
        assert decode_reply(frame) == [2, "doc:1", ["title", "hello"], ["doc:2"]]

    def test_maps(self) -> None:
        assert decode_reply({b"total_results": 1, b"results": [b"a"]}) == {
            "total_results": 1,
            "results": ["a"],
        }

    def test_error_reply_raises_command_error(self) -> None:
        with pytest.raises(CommandError) as exc_info:
            decode_reply(Exception("Unknown index name"), "FT.INFO")
        assert exc_info.value.command == "FT.INFO"

    def test_nested_error_reply_raises(self) -> None:
        with pytest.raises(CommandError):
            decode_reply([b"ok", ValueError("bad")])

    def test_unknown_type_raises_decode_error(self) -> None:
        with pytest.raises(ReplyDecodeError):
            decode_reply(object())
