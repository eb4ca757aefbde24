"""Exception types raised by video-agent-skills."""

from __future__ import annotations


class VideoAgentError(Exception):
    """Base class for all errors raised by this package."""


class UsageError(VideoAgentError):
    """Invalid or missing command-line input."""


class VideoPathError(VideoAgentError, FileNotFoundError):
    """The video path is missing or is not a regular file."""


class MissingAPIKeyError(VideoAgentError):
    """No Gemini API key could be resolved."""


class ConfigFileError(VideoAgentError):
    """The per-user config file exists but cannot be used."""


class CancelledError(VideoAgentError):
    """The operation was cancelled or its deadline expired."""

    def __init__(self, reason: str = "cancelled"):
        super().__init__(reason)
        self.reason = reason
