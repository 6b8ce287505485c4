"""Entry point — configures logging and runs the picker on the tkinter main thread."""

import ctypes
import logging

from picker_window import TimePickerWindow
from settings import load_settings

logger = logging.getLogger(__name__)


def _enable_dpi_awareness() -> None:
    # Crisp fonts on Hi-DPI Windows monitors; no-op elsewhere
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError) as exc:
        logger.debug("DPI awareness not available: %s", exc)


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings["log_level"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _enable_dpi_awareness()

    window = TimePickerWindow(settings=settings)
    window.run()


if __name__ == "__main__":
    main()
