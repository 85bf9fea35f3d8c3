"""Kernel – errors, value kinds, record access, specifications and time."""
