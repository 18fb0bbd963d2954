"""Kernel – errors and wire value types shared by every layer."""
