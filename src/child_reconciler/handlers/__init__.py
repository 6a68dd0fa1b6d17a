"""Handler helpers for kopf operators that own child resources."""

from .base import ChildHandler

__all__ = ["ChildHandler"]
