import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from gui.app import configure_logging  # noqa: E402
from gui.log import setup_logger  # noqa: E402
from rainbow.merger import OverlayMerger  # noqa: E402
from rainbow.ranges import HighlightRange, TextDocument  # noqa: E402
from rainbow.styles import IDENTIFIER, make_palette  # noqa: E402


def test_setup_logger_writes_dated_file(tmp_path):
    logger = setup_logger("rainbow.test_log", logs_dir=tmp_path, level=logging.DEBUG)
    try:
        logger.debug("overlay applied")
        for handler in logger.handlers:
            handler.flush()
        files = list(tmp_path.glob("rainbow_preview_*.log"))
        assert len(files) == 1
        content = files[0].read_text(encoding="utf-8")
        assert "rainbow.test_log - DEBUG - overlay applied" in content
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


def test_setup_logger_replaces_handlers(tmp_path):
    setup_logger("rainbow.test_log_twice", logs_dir=tmp_path)
    logger = setup_logger("rainbow.test_log_twice", logs_dir=tmp_path)
    try:
        assert len(logger.handlers) == 1
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


def test_app_logging_keeps_engine_debug_messages(tmp_path):
    configure_logging(logs_dir=tmp_path)
    rainbow_logger = logging.getLogger("rainbow")
    gui_logger = logging.getLogger("gui")
    try:
        assert rainbow_logger.level == logging.DEBUG
        assert gui_logger.level == logging.INFO
        OverlayMerger(make_palette(2)).apply(
            TextDocument("x"), None, [HighlightRange(0, 1, IDENTIFIER)]
        )
        for handler in rainbow_logger.handlers:
            handler.flush()
        content = next(tmp_path.glob("rainbow_preview_*.log")).read_text(encoding="utf-8")
        assert "rainbow.merger - DEBUG - rainbow overlay: 1 eligible ranges" in content
    finally:
        for logger in (rainbow_logger, gui_logger):
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
