"""Download remote documents to local paths without clobbering local edits.

When the destination already exists and overwrite was not requested, the
download is compared with the file on disk by SHA-256 digest. Identical
content leaves the file alone; different content is a conflict and the
download is refused.

Writes go straight to the destination path. If anything fails after the
destination was opened for writing, the partial file is deleted before the
error propagates.
"""

import hashlib
import logging
from collections.abc import Generator, Iterable
from contextlib import closing
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from apiref.core.errors import DownloadError, ValidationError
from apiref.core.urls import is_remote_url
from apiref.core.user_feedback import UserFeedback
from apiref.integrations.http import HttpClient, HttpRequestError

logger = logging.getLogger(__name__)

DownloadStatus = Literal["written", "unchanged"]

_READ_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class DownloadOutcome:
    """Result of a successful fetch.

    Attributes:
        status: "written" if the destination was (over)written, "unchanged" if
            it already held identical content
        destination: Absolute destination path
    """

    status: DownloadStatus
    destination: Path


def content_digest(chunks: Iterable[bytes]) -> bytes:
    """SHA-256 digest over the concatenation of chunks."""
    digest = hashlib.sha256()
    for chunk in chunks:
        digest.update(chunk)
    return digest.digest()


def file_digest(path: Path) -> bytes:
    """SHA-256 digest of a file's full contents."""
    with path.open("rb") as f:
        return content_digest(iter(lambda: f.read(_READ_CHUNK_SIZE), b""))


class ContentFetcher:
    """Materialize remote content at a local path.

    Args:
        http: HTTP client used for the download
        working_dir: Base for resolving relative destination paths
        feedback: Where progress messages go
    """

    def __init__(self, http: HttpClient, working_dir: Path, feedback: UserFeedback) -> None:
        self._http = http
        self._working_dir = working_dir
        self._feedback = feedback

    def resolve_destination(self, destination: Path | str) -> Path:
        """Return destination as an absolute path, relative to the working dir."""
        path = Path(destination)
        if path.is_absolute():
            return path
        return self._working_dir / path

    def fetch(self, source_url: str, destination: Path | str, *, overwrite: bool) -> DownloadOutcome:
        """Download source_url to destination.

        Args:
            source_url: Absolute http(s) URL
            destination: Local path; relative paths resolve against the working dir
            overwrite: Replace an existing file even if its content differs

        Returns:
            DownloadOutcome describing what happened to the destination

        Raises:
            ValidationError: If source_url is not an absolute http(s) URL
            DownloadError: On network failure, local I/O failure, or (with
                overwrite=False) when the existing file's content differs
        """
        if not is_remote_url(source_url):
            raise ValidationError(f"'{source_url}' is not an absolute http(s) URL.")

        destination_path = self.resolve_destination(destination)
        destination_exists = destination_path.exists()
        self._feedback.info(f"Downloading to '{destination_path}'.")

        if destination_exists and not overwrite:
            content = self._download_all(source_url, destination_path)
            if self._matches_existing(content, destination_path):
                self._feedback.info(f"Not overwriting existing and matching file '{destination_path}'.")
                return DownloadOutcome(status="unchanged", destination=destination_path)
            raise DownloadError(
                f"File '{destination_path}' already exists and differs from '{source_url}'. "
                "Aborting to avoid conflicts.",
                reason="conflict",
                destination=destination_path,
            )

        if not destination_exists:
            self._ensure_parent_dir(destination_path)

        self._write(self._http.stream_bytes(source_url), source_url, destination_path)
        return DownloadOutcome(status="written", destination=destination_path)

    def _download_all(self, source_url: str, destination_path: Path) -> bytes:
        try:
            return b"".join(self._http.stream_bytes(source_url))
        except HttpRequestError as e:
            raise DownloadError(
                f"Downloading '{source_url}' failed: {e}", reason="network", destination=destination_path
            ) from e

    def _matches_existing(self, content: bytes, destination_path: Path) -> bool:
        try:
            existing = file_digest(destination_path)
        except OSError as e:
            raise DownloadError(
                f"Could not read '{destination_path}': {e}", reason="io", destination=destination_path
            ) from e
        return content_digest([content]) == existing

    def _ensure_parent_dir(self, destination_path: Path) -> None:
        try:
            destination_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DownloadError(
                f"Could not create directory '{destination_path.parent}': {e}",
                reason="io",
                destination=destination_path,
            ) from e

    def _write(self, chunks: Generator[bytes, None, None], source_url: str, destination_path: Path) -> None:
        with closing(chunks):
            # Connection and status errors surface here, before the destination is opened
            try:
                first_chunk = next(chunks, b"")
            except HttpRequestError as e:
                raise DownloadError(
                    f"Downloading '{source_url}' failed: {e}", reason="network", destination=destination_path
                ) from e

            reached_write = False
            try:
                with destination_path.open("wb") as f:
                    reached_write = True
                    f.write(first_chunk)
                    for chunk in chunks:
                        f.write(chunk)
            except (HttpRequestError, OSError) as e:
                if reached_write:
                    logger.debug("Removing partially written %s", destination_path)
                    destination_path.unlink(missing_ok=True)
                reason = "network" if isinstance(e, HttpRequestError) else "io"
                raise DownloadError(
                    f"Downloading '{source_url}' to '{destination_path}' failed: {e}",
                    reason=reason,
                    destination=destination_path,
                ) from e
