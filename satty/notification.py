"""Result messages, optionally shown as desktop notifications."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable

_APP_NAME = "Satty"
_ICON_NAME = "satty"


def _show_notification(msg: str) -> None:
    """Send a desktop notification; silently does nothing when no notifier exists."""
    notify_send = shutil.which("notify-send")
    if notify_send is None:
        return
    try:
        subprocess.run(
            [notify_send, "--app-name", _APP_NAME, "--icon", _ICON_NAME, _APP_NAME, msg],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
            timeout=10,
        )
    except (OSError, subprocess.SubprocessError):
        pass


def log_result(
    msg: str,
    notify: bool,
    notifier: Callable[[str], None] | None = None,
) -> None:
    """Print ``msg`` and, if ``notify`` is set, pass it to ``notifier``."""
    print(msg)
    if notify:
        (notifier or _show_notification)(msg)