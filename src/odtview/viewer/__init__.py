"""Terminal presentation layer over parsed sentences."""

from .session import SentenceSession
from .terminal import TerminalViewer

__all__ = ["SentenceSession", "TerminalViewer"]
