"""Terminal presentation for godirs."""

from .dirs_view import DirsView

__all__ = ["DirsView"]
