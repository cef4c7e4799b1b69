"""Relay client for the external file host that stores uploaded images.
"""

from typing import Optional
import logging

import httpx

from app.exceptions import UpstreamServiceError

logger = logging.getLogger("nutritrack.upload")


def normalize_hosted_url(host: str, body: str) -> str:
    """Build an absolute URL from the file host's plain-text reply.

    The host answers with either a bare token or a full URL followed by a
    newline; both become ``<host>/<token>``.
    """
    token = body.replace("\n", "").replace("\r", "").strip()
    prefix = f"{host}/"
    while token.startswith(prefix):
        token = token[len(prefix):]
    return f"{prefix}{token.lstrip('/')}"


class UploadRelay:
    """Forwards a single file to the file host and returns its public URL."""

    def __init__(
        self,
        host: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.host = host.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def relay(self, content: bytes, filename: str, content_type: Optional[str]) -> str:
        """Upload ``content`` as multipart field ``file``.

        Raises:
            UpstreamServiceError: on transport errors or a non-200 reply
        """
        files = {
            "file": (
                filename or "upload",
                content,
                content_type or "application/octet-stream",
            )
        }
        try:
            with httpx.Client(
                timeout=self.timeout, follow_redirects=True, transport=self._transport
            ) as client:
                resp = client.post(self.host, files=files)
        except httpx.HTTPError as exc:
            logger.error("upload_relay_failed host=%s error=%s", self.host, exc)
            raise UpstreamServiceError("Error processing file upload") from exc

        if resp.status_code != 200:
            logger.error(
                "upload_relay_rejected host=%s status=%d", self.host, resp.status_code
            )
            raise UpstreamServiceError(
                f"Error uploading file to {httpx.URL(self.host).host}"
            )

        url = normalize_hosted_url(self.host, resp.text)
        logger.info("upload_relayed filename=%s bytes=%d url=%s", filename, len(content), url)
        return url
