"""Application spellcheck – FT.SPELLCHECK terms and encoder."""
from mp_ftsearch.application.spellcheck.encoder import encode_spellcheck
from mp_ftsearch.application.spellcheck.terms import Exclude, Include, SpellcheckTerms

__all__ = ["Exclude", "Include", "SpellcheckTerms", "encode_spellcheck"]
