"""Snapshot errors – encoding and decoding persisted list state."""

from __future__ import annotations

from typing import Any

from listerkit.kernel.errors.base import ListerKitError


class SnapshotError(ListerKitError):
    """Failed to serialize or restore a list snapshot."""

    default_code = "snapshot_error"


class SerializeError(SnapshotError):
    """The list holds state that the snapshot format cannot represent."""

    default_code = "serialize_error"


class FormatError(SnapshotError):
    """Snapshot data is malformed or incomplete.

    ``key`` names the first offending snapshot key when known.
    """

    default_code = "format_error"
    subject_field = "key"

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.key = key


__all__ = ["FormatError", "SerializeError", "SnapshotError"]
