"""Sous-package CLI commands - re-exporte les commandes publiques."""

from codec_oracle.adapters.cli.commands.capability_commands import (
    check,
    profile,
    query,
)

__all__ = [
    "check",
    "profile",
    "query",
]
