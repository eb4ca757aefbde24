"""Gemini File API client: upload a video, wait for it, and prompt a model about it."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from google import genai
from google.genai import types

from video_agent_skills.cancellation import Cancellation
from video_agent_skills.errors import CancelledError
from video_agent_skills.media import detect_video_mime
from video_agent_skills.types import POLL_INTERVAL_SECONDS, Invocation

logger = logging.getLogger(__name__)


def _state_name(file: types.File) -> str:
    state = file.state
    return getattr(state, "name", None) or str(state)


def _is_active(file: types.File) -> bool:
    return file.state == types.FileState.ACTIVE


def build_contents(file: types.File, prompt: str) -> list[types.Content]:
    """One user turn: the uploaded video reference followed by the instruction text."""
    parts = [
        types.Part.from_uri(file_uri=file.uri, mime_type=file.mime_type),
        types.Part.from_text(text=prompt),
    ]
    return [types.Content(role="user", parts=parts)]


class GeminiVideoClient:
    """Thin wrapper around ``google.genai.Client`` for the upload/poll/generate flow.

    Every remote call checks the shared ``Cancellation`` first; the readiness
    poll sleeps on it, so cancelling or hitting the deadline stops the loop
    between status checks.
    """

    def __init__(
        self,
        api_key: str,
        timeout: float | None = None,
        poll_interval: float = POLL_INTERVAL_SECONDS,
    ):
        if not api_key:
            raise ValueError("Gemini API key is required.")

        http_options = None
        if timeout:
            http_options = types.HttpOptions(timeout=int(timeout * 1000))  # milliseconds
        self.client = genai.Client(api_key=api_key, vertexai=False, http_options=http_options)
        self.poll_interval = poll_interval

    def upload(
        self,
        path: str | Path,
        mime_type: str,
        cancel: Cancellation | None = None,
    ) -> types.File:
        if cancel is not None:
            cancel.check()
        file = self.client.files.upload(
            file=str(path),
            config=types.UploadFileConfig(mime_type=mime_type),
        )
        logger.info("Uploaded %s as %s (state=%s)", path, file.name, _state_name(file))
        return file

    def wait_for_active(
        self,
        file: types.File,
        cancel: Cancellation | None = None,
        poll_interval: float | None = None,
        progress_callback: Callable[[types.File], None] | None = None,
    ) -> types.File:
        """Re-fetch ``file`` every ``poll_interval`` seconds until it is ACTIVE.

        There is no attempt cap and no special handling of FAILED: only ACTIVE
        or cancellation ends the loop.

        Raises:
            CancelledError: ``cancel`` fired while waiting.
        """
        if cancel is None:
            cancel = Cancellation()
        interval = self.poll_interval if poll_interval is None else poll_interval

        while not _is_active(file):
            logger.info("Processing video... (state=%s)", _state_name(file))
            if progress_callback:
                progress_callback(file)
            if cancel.wait(interval):
                raise CancelledError(cancel.reason or "cancelled")
            file = self.client.files.get(name=file.name)

        return file

    def generate(
        self,
        model: str,
        file: types.File,
        prompt: str,
        cancel: Cancellation | None = None,
    ) -> str:
        if cancel is not None:
            cancel.check()
        response = self.client.models.generate_content(
            model=model,
            contents=build_contents(file, prompt),
        )
        return response.text or ""

    def run(
        self,
        invocation: Invocation,
        cancel: Cancellation | None = None,
        progress_callback: Callable[[types.File], None] | None = None,
    ) -> str:
        """Upload the invocation's video, wait until it is usable, and return the model text."""
        mime_type = detect_video_mime(invocation.video)
        file = self.upload(invocation.video, mime_type, cancel=cancel)
        file = self.wait_for_active(file, cancel=cancel, progress_callback=progress_callback)
        return self.generate(invocation.model, file, invocation.prompt, cancel=cancel)
