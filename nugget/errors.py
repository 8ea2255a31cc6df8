"""Failures raised by the external collaborators of the render pipeline."""

from __future__ import annotations


class CollaboratorFailure(RuntimeError):
    """A metadata, download, extraction or render step failed.

    ``stage`` names the pipeline step so the CLI can report where the run
    stopped.
    """

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(f"{stage}: {message}")
        self.stage = stage


class RenderError(CollaboratorFailure):
    """ffmpeg exited with an error; ``stderr`` holds its diagnostics."""

    def __init__(self, stage: str, stderr: str) -> None:
        super().__init__(stage, stderr or "ffmpeg failed")
        self.stderr = stderr
