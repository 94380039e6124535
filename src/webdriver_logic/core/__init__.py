"""Core infrastructure for webdriver-logic."""

from webdriver_logic.core.exceptions import (
    ElementStateError,
    OracleError,
    ScopeError,
    SessionError,
    TransientOracleError,
    UnknownServerError,
    WebDriverLogicError,
)
from webdriver_logic.core.config import Config
from webdriver_logic.core.session import create_driver, end_session, set_driver, start_session

__all__ = [
    "Config",
    "WebDriverLogicError",
    "OracleError",
    "TransientOracleError",
    "ElementStateError",
    "UnknownServerError",
    "SessionError",
    "ScopeError",
    "create_driver",
    "set_driver",
    "start_session",
    "end_session",
]
