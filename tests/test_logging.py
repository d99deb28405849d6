import logging

import pytest

from garage_api.app.core.logging_config import setup_logging


@pytest.fixture
def bare_root():
    """Root logger stripped of handlers; ones added by the test are closed afterwards"""
    root = logging.getLogger()
    saved_level = root.level
    root.handlers.clear()
    yield root
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)


class TestSetupLogging:
    def test_attaches_console_handler(self, bare_root):
        bare_root.handlers.clear()

        setup_logging("DEBUG")

        assert bare_root.level == logging.DEBUG
        assert [type(h) for h in bare_root.handlers] == [logging.StreamHandler]

    def test_adds_file_handler(self, bare_root, tmp_path):
        logfile = tmp_path / "garage.log"
        bare_root.handlers.clear()

        setup_logging("INFO", str(logfile))
        logging.getLogger("garage_api.test").info("hello")

        assert [type(h) for h in bare_root.handlers] == [logging.StreamHandler, logging.FileHandler]
        bare_root.handlers[1].flush()
        assert "[INFO] garage_api.test: hello" in logfile.read_text(encoding="utf-8")

    def test_level_updated_when_already_configured(self, bare_root):
        bare_root.handlers.clear()

        setup_logging("INFO")
        setup_logging("ERROR")

        assert bare_root.level == logging.ERROR
        assert len(bare_root.handlers) == 1
