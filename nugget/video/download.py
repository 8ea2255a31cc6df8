"""Download of the selected encoding of the source video."""

from __future__ import annotations

import logging
from typing import Any

from halo import Halo
from yt_dlp import YoutubeDL

from nugget.domain import VideoFormat
from nugget.errors import CollaboratorFailure
from nugget.utils.logger import get_logger
from nugget.utils.tempfiles import discard, tmp_path, unique_name

logger: logging.Logger = get_logger(__name__)


def progress_text(status: dict[str, Any]) -> str | None:
    """Returns the percentage received so far, when the total size is known."""
    total = status.get("total_bytes") or status.get("total_bytes_estimate")
    received = status.get("downloaded_bytes")
    if not total or received is None:
        return None
    return f"Downloading video... {received / total * 100:.2f}%"


def download_video(url: str, video_format: VideoFormat) -> str:
    """
    Downloads one encoding of ``url`` into the temporary folder.

    Arguments:
        url (str): Source video address.
        video_format (VideoFormat): Encoding to download.

    Returns:
        str: Path of the downloaded file.
    """
    file_path: str = tmp_path(unique_name(f".{video_format.extension}"))

    with Halo(text="Downloading video...", spinner="dots", text_color="green") as spinner:

        def _on_progress(status: dict[str, Any]) -> None:
            text = progress_text(status)
            if text:
                spinner.text = text

        options = {
            "format": video_format.format_id,
            "outtmpl": file_path,
            "quiet": True,
            "no_warnings": True,
            "noprogress": True,
            "progress_hooks": [_on_progress],
        }
        try:
            with YoutubeDL(options) as downloader:
                downloader.download([url])
        except Exception as err:
            discard(file_path)
            logger.error(msg=f"Failed to download video: {err}", exc_info=True)
            raise CollaboratorFailure("download", str(err)) from err

    logger.info(msg=f"Video downloaded to {file_path}")
    return file_path
