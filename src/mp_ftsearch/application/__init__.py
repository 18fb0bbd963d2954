"""Application – option models, argument encoders and command functions."""
