import logging

from app.logging_config import resolve_level, setup_logging


def test_explicit_level_name_wins():
    assert resolve_level("warning", debug=True) == logging.WARNING

def test_debug_flag_without_level_name():
    assert resolve_level("", debug=True) == logging.DEBUG
    assert resolve_level("", debug=False) == logging.INFO

def test_unknown_level_name_falls_back_to_info():
    assert resolve_level("chatty", debug=True) == logging.INFO

def test_setup_logging_quiets_sqlalchemy():
    app_logger = setup_logging(logging.DEBUG)

    assert app_logger.name == "app"
    assert app_logger.level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
