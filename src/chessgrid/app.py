"""Application entry point."""

from __future__ import annotations

import logging
import sys

from chessgrid.ui.settings import AppSettings


def main() -> None:
    """Launch the chessgrid window."""
    from chessgrid.ui.bootstrap import run_application

    settings = AppSettings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run_application(settings=settings))


if __name__ == "__main__":
    main()
