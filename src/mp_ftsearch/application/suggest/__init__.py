"""Application suggest – auto-complete dictionary encoders."""
from mp_ftsearch.application.suggest.encoder import encode_sugadd, encode_sugget

__all__ = ["encode_sugadd", "encode_sugget"]
