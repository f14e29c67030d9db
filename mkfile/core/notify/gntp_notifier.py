from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Optional, Protocol

import gntp.errors
import gntp.notifier

from mkfile.core.errors import NotificationError


CREATE_EVENT = "create"
DEFAULT_PORT = 23053
DEFAULT_ICON_NAME = "mkfile.jpg"


class NotificationSink(Protocol):
    def notify(self, event: str, title: str, message: str) -> Optional[NotificationError]: ...


class NullNotifier:
    """Used for --no-gntp and whenever registration with the server failed."""

    def notify(self, event: str, title: str, message: str) -> Optional[NotificationError]:
        return None


def default_icon_path() -> Path:
    return Path(sys.argv[0]).resolve().parent / DEFAULT_ICON_NAME


def load_icon(path: str | Path | None) -> tuple[Optional[bytes], Optional[str]]:
    """Read icon bytes. Returns (data, warning); a missing icon is not a warning."""
    p = Path(path) if path else default_icon_path()
    if not p.exists():
        return None, None
    try:
        return p.read_bytes(), None
    except OSError as e:
        return None, f"could not load icon {p}: {e}"


class GntpNotifier:
    """Registered GNTP client handle.

    Build it once with `initialize` during setup and pass it to whoever needs to
    notify; it holds no mutable state after construction.
    """

    def __init__(self, client: Any, app_name: str) -> None:
        self._client = client
        self.app_name = app_name

    @classmethod
    def initialize(
        cls,
        app_name: str,
        *,
        host: str = "localhost",
        port: int = DEFAULT_PORT,
        password: Optional[str] = None,
        icon: Optional[bytes] = None,
    ) -> "GntpNotifier":
        """Register the `create` notification type. Raises NotificationError."""
        client = gntp.notifier.GrowlNotifier(
            applicationName=app_name,
            notifications=[CREATE_EVENT],
            defaultNotifications=[CREATE_EVENT],
            applicationIcon=icon,
            hostname=host,
            password=password,
            port=port,
        )
        try:
            result = client.register()
        except (gntp.errors.BaseError, OSError, ValueError) as e:
            raise NotificationError(
                code="E_NOTIFY_REGISTER",
                message=f"GNTP registration failed: {e}",
                detail=repr(e),
            ) from e

        if result is not True:
            raise NotificationError(
                code="E_NOTIFY_REGISTER",
                message=f"GNTP registration failed: {result}",
                detail=repr(result),
            )

        return cls(client, app_name)

    def notify(self, event: str, title: str, message: str) -> Optional[NotificationError]:
        try:
            result = self._client.notify(noteType=event, title=title, description=message)
        except (gntp.errors.BaseError, OSError, ValueError) as e:
            return NotificationError(
                code="E_NOTIFY", message=f"notification error: {e}", detail=repr(e)
            )
        if result is not True:
            return NotificationError(
                code="E_NOTIFY", message=f"notification error: {result}", detail=repr(result)
            )
        return None
