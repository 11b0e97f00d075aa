"""Entry point for the linked list workbench."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from .gui import ListWorkbenchWindow


def main() -> int:
    """Launch the PySide6 event loop and show the workbench window."""
    app = QApplication(sys.argv)
    window = ListWorkbenchWindow()
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
