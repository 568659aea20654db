"""Byte retrieval for local files and SFTP sources."""

import logging
from pathlib import Path

import paramiko

from sytralrt.domain.errors import RetrievalError
from sytralrt.domain.models.source import SourceLocation

logger = logging.getLogger(__name__)

DEFAULT_SFTP_PORT = 22


class UriByteRetriever:
    """Fetches feed content according to the scheme of its location.

    Supported schemes are ``file`` and ``sftp``. Any other scheme fails
    before any I/O is attempted.
    """

    def retrieve(self, location: SourceLocation, timeout: float | None = None) -> bytes:
        if location.scheme == "sftp":
            return self._retrieve_with_sftp(location, timeout)
        if location.scheme == "file":
            return self._retrieve_with_fs(location)
        raise RetrievalError(f"Unsupported protocol {location.scheme!r} for {location}")

    @staticmethod
    def _retrieve_with_fs(location: SourceLocation) -> bytes:
        try:
            return Path(location.path).read_bytes()
        except OSError as e:
            raise RetrievalError(f"Unable to read {location.path}: {e}") from e

    @staticmethod
    def _retrieve_with_sftp(location: SourceLocation, timeout: float | None) -> bytes:
        logger.debug(f"Fetching {location} over SFTP")
        try:
            with paramiko.SSHClient() as ssh_client:
                # Host identity is not verified, sources are reached on a trusted network
                ssh_client.set_missing_host_key_policy(paramiko.AutoAddPolicy())
                ssh_client.connect(
                    location.host,
                    port=location.port or DEFAULT_SFTP_PORT,
                    username=location.username,
                    password=location.password,
                    timeout=timeout,
                    banner_timeout=timeout,
                    auth_timeout=timeout,
                    allow_agent=False,
                    look_for_keys=False,
                )
                with ssh_client.open_sftp() as sftp_client:
                    channel = sftp_client.get_channel()
                    if channel is not None:
                        channel.settimeout(timeout)
                    with sftp_client.open(location.path, "rb") as remote_file:
                        return remote_file.read()
        except (paramiko.SSHException, OSError) as e:
            raise RetrievalError(f"Unable to fetch {location} over SFTP: {e}") from e
