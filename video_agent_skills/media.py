"""Content-type detection for local video files."""

from __future__ import annotations

import mimetypes
from pathlib import Path

from video_agent_skills.errors import VideoPathError
from video_agent_skills.types import DEFAULT_MIME_TYPE

# Built-in extension table only; host files such as /etc/mime.types are not read.
_MIME_TABLE = mimetypes.MimeTypes()


def detect_video_mime(path: str | Path) -> str:
    """Guess the upload content type from the file extension.

    Falls back to ``video/mp4`` when the extension is missing or unknown.

    Raises:
        VideoPathError: the path does not exist or is a directory.
    """
    path = Path(path)
    if not path.exists():
        raise VideoPathError(f"video file not found: {path}")
    if path.is_dir():
        raise VideoPathError("video path is a directory")

    ext = path.suffix.lower()
    if not ext:
        return DEFAULT_MIME_TYPE

    mime_type, _ = _MIME_TABLE.guess_type(f"video{ext}", strict=False)
    if not mime_type:
        return DEFAULT_MIME_TYPE
    return mime_type.split(";", 1)[0].strip()
