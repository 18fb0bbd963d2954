"""Testing helpers for code built on mp_ftsearch."""
