"""Application service façades."""

from .head_service import HeadRequest, HeadService

__all__ = ["HeadRequest", "HeadService"]
