"""Launcher for running from a source checkout or a PyInstaller build: `python main.py`."""

from phonebook.__main__ import main

if __name__ == "__main__":
    main()
