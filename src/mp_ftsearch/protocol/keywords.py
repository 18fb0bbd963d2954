"""Protocol keyword table."""
from __future__ import annotations

from enum import StrEnum


class Keyword(StrEnum):
    """Literal keyword tokens understood by the search module's parsers."""

    ALL = "*"
    APPLY = "APPLY"
    AS = "AS"
    COUNT = "COUNT"
    DD = "DD"
    DIALECT = "DIALECT"
    DISTANCE = "DISTANCE"
    EXCLUDE = "EXCLUDE"
    EXPANDER = "EXPANDER"
    EXPLAINSCORE = "EXPLAINSCORE"
    FIELDS = "FIELDS"
    FILTER = "FILTER"
    FRAGS = "FRAGS"
    FUZZY = "FUZZY"
    GEOFILTER = "GEOFILTER"
    GROUPBY = "GROUPBY"
    HIGHLIGHT = "HIGHLIGHT"
    INCLUDE = "INCLUDE"
    INCR = "INCR"
    INFIELDS = "INFIELDS"
    INKEYS = "INKEYS"
    INORDER = "INORDER"
    LANGUAGE = "LANGUAGE"
    LEN = "LEN"
    LIMIT = "LIMIT"
    LOAD = "LOAD"
    MAX = "MAX"
    MAXIDLE = "MAXIDLE"
    NOCONTENT = "NOCONTENT"
    NOSTOPWORDS = "NOSTOPWORDS"
    PARAMS = "PARAMS"
    PAYLOAD = "PAYLOAD"
    REDUCE = "REDUCE"
    RETURN = "RETURN"
    SCORER = "SCORER"
    SEPARATOR = "SEPARATOR"
    SKIPINITIALSCAN = "SKIPINITIALSCAN"
    SLOP = "SLOP"
    SORTBY = "SORTBY"
    SUMMARIZE = "SUMMARIZE"
    TAGS = "TAGS"
    TERMS = "TERMS"
    TIMEOUT = "TIMEOUT"
    VERBATIM = "VERBATIM"
    WITHCOUNT = "WITHCOUNT"
    WITHCURSOR = "WITHCURSOR"
    WITHPAYLOADS = "WITHPAYLOADS"
    WITHSCORES = "WITHSCORES"
    WITHSORTKEYS = "WITHSORTKEYS"


class SortOrder(StrEnum):
    ASC = "ASC"
    DESC = "DESC"


__all__ = ["Keyword", "SortOrder"]
