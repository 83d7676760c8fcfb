"""
Design (__main__.py)
- Purpose: Application entry point. Configures logging, builds the PhoneBook and the UI,
           and runs the Tk main loop.
- Side effects: Opens the main window; desktop notifications via plyer.
"""

import logging
import tkinter as tk

from plyer import notification

from .config import LOG_FORMAT, LOG_DATEFMT, NOTIFY_TIMEOUT_SEC
from .repository import PhoneBook
from .ui import AppUI

log = logging.getLogger("phonebook")


def desktop_notify(title: str, message: str) -> None:
    """Show a desktop notification; platforms without a plyer backend only get a log line."""
    try:
        notification.notify(title=title, message=message, timeout=NOTIFY_TIMEOUT_SEC)
    except NotImplementedError:
        log.warning("Desktop notifications unavailable: %s", message)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root = tk.Tk()
    book = PhoneBook()
    AppUI(root, book, notify=desktop_notify)
    log.info("Phone book started")
    root.mainloop()


if __name__ == "__main__":
    main()
