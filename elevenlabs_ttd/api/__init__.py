"""HTTP execution layer for provider endpoints."""

from .executor import DEFAULT_BASE_URL, DialogueExecutor

__all__ = ["DEFAULT_BASE_URL", "DialogueExecutor"]
