"""
IndexNow key file — publish the verification token as a static file.

IndexNow proves site ownership by fetching ``<site>/<key>.txt`` and
comparing its body with the key. At build time we drop that file into
the public assets directory so the host serves it verbatim.

The emitter never raises: a missing token is an expected configuration
state (``skipped``), and an I/O failure is reported as ``failed`` so the
surrounding build keeps going.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

KEY_FILE_SUFFIX = ".txt"

# Format published by the IndexNow protocol; advisory only
_INDEXNOW_KEY_RE = re.compile(r"^[a-zA-Z0-9-]{8,128}$")


@dataclass
class KeyFileResult:
    """Outcome of one emitter run."""

    status: str = "skipped"             # "written" | "skipped" | "failed"
    token_present: bool = False
    path: Path | None = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "written"

    @property
    def skipped(self) -> bool:
        return self.status == "skipped"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "token_present": self.token_present,
            "path": str(self.path) if self.path else None,
            "error": self.error or None,
        }


def key_file_name(token: str) -> str:
    """File name under which the token is published."""
    return f"{token}{KEY_FILE_SUFFIX}"


def looks_like_indexnow_key(token: str) -> bool:
    """Whether the token matches the IndexNow key format (8-128 of a-zA-Z0-9-)."""
    return bool(_INDEXNOW_KEY_RE.match(token))


def emit_key_file(token: str | None, output_dir: Path) -> KeyFileResult:
    """Write ``<output_dir>/<token>.txt`` containing exactly the token.

    Creates ``output_dir`` if needed and overwrites an existing key file,
    so repeated runs with the same token leave the same single file.

    Args:
        token: The verification token. None or empty skips the run.
        output_dir: Public assets directory.

    Returns:
        KeyFileResult with status written, skipped, or failed.
    """
    if not token:
        logger.warning(
            "IndexNow key not configured; key file will not be created."
        )
        return KeyFileResult(status="skipped")

    output_dir = Path(output_dir)
    path = output_dir / key_file_name(token)

    # The key file must sit directly in output_dir
    if path.parent != output_dir:
        error = f"Key {token!r} does not name a file inside {output_dir}"
        logger.error("Refusing to create IndexNow key file: %s", error)
        return KeyFileResult(status="failed", token_present=True, error=error)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        path.write_bytes(token.encode("utf-8"))
    except (OSError, ValueError) as e:
        logger.error("Failed to create IndexNow key file %s: %s", path, e)
        return KeyFileResult(
            status="failed", token_present=True, path=path, error=str(e),
        )

    logger.info("Created IndexNow key file: %s", path)
    return KeyFileResult(status="written", token_present=True, path=path)
