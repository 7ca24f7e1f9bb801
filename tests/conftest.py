import logging

import pytest

from backslash_escape import config


@pytest.fixture(autouse=True)
def default_config():
    config.reset_config()
    yield
    config.reset_config()


@pytest.fixture
def write_config(tmp_path):
    def _write(text):
        path = tmp_path / "config.ini"
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)
