"""Dependent filter options endpoints for the Nova-style admin panel."""

from .conf import settings

__all__ = ["settings"]
