"""Command modules for onboard-cli."""

from .setup import onboard, preflight, providers

__all__ = ["onboard", "preflight", "providers"]
