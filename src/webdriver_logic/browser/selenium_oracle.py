"""Selenium WebDriver implementation of the oracle."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from selenium.common.exceptions import (
    InvalidElementStateException,
    NoSuchElementException,
    StaleElementReferenceException,
    WebDriverException,
)

from webdriver_logic.browser.oracle import BaseOracle
from webdriver_logic.browser.scope import Scope
from webdriver_logic.core.exceptions import (
    ElementStateError,
    OracleError,
    UnknownServerError,
)

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_unknown_server_error(error: WebDriverException) -> bool:
    """Check whether a WebDriver error is the remote end's generic "unknown error".

    Selenium maps the "unknown error" status to the base WebDriverException and
    keeps only the driver's free-text message, which differs between drivers.
    Every other status has its own subclass, so the exact type decides.
    """
    return type(error) is WebDriverException


class SeleniumOracle(BaseOracle):
    """Oracle backed by a Selenium WebDriver session.

    Translates Selenium exceptions into the oracle error kinds:
    - Stale or invalid-state elements raise ElementStateError
    - Unknown server errors raise UnknownServerError
    - Anything else raised by WebDriver becomes OracleError

    Example:
        >>> from selenium import webdriver
        >>> oracle = SeleniumOracle(webdriver.Firefox())
        >>> oracle.navigate("http://localhost:5744")
        >>> oracle.title()
        'Ministache'
    """

    name = "selenium"

    def __init__(self, driver: WebDriver) -> None:
        """Initialize the oracle.

        Args:
            driver: An already started WebDriver
        """
        self.driver = driver

    def _call(self, operation: str, func: Callable[[], T]) -> T:
        try:
            return func()
        except (StaleElementReferenceException, InvalidElementStateException) as e:
            raise ElementStateError(
                f"Element unusable for {operation}",
                operation=operation,
                details={"error": e.msg},
            ) from e
        except WebDriverException as e:
            if is_unknown_server_error(e):
                raise UnknownServerError(
                    f"Unknown server error during {operation}",
                    operation=operation,
                    details={"error": e.msg},
                ) from e
            raise OracleError(
                f"WebDriver call failed: {operation}",
                operation=operation,
                details={"error": e.msg or str(e), "error_type": type(e).__name__},
            ) from e

    # Enumeration

    def find_elements(self, scope: Scope) -> list[WebElement]:
        elements = self._call("find_elements", lambda: self.driver.find_elements(scope.by, scope.value))
        logger.debug(f"{len(elements)} elements in scope {scope}")
        return elements

    def find_child_elements(self, parent: WebElement, scope: Scope) -> list[WebElement]:
        children = self._call(
            "find_child_elements",
            lambda: parent.find_elements(scope.by, scope.value),
        )
        return [child for child in children if child is not None]

    def find_element(self, scope: Scope) -> WebElement | None:
        try:
            return self._call("find_element", lambda: self.driver.find_element(scope.by, scope.value))
        except OracleError as e:
            if isinstance(e.__cause__, NoSuchElementException):
                return None
            raise

    # Element properties

    def attribute(self, element: WebElement, name: str) -> str | None:
        return self._call("attribute", lambda: element.get_attribute(name))

    def tag(self, element: WebElement) -> str:
        return self._call("tag", lambda: element.tag_name)

    def text(self, element: WebElement) -> str:
        return self._call("text", lambda: element.text)

    def size(self, element: WebElement) -> dict[str, int]:
        size = self._call("size", lambda: element.size)
        return {"width": size["width"], "height": size["height"]}

    def location(self, element: WebElement) -> dict[str, int]:
        location = self._call("location", lambda: element.location)
        return {"x": location["x"], "y": location["y"]}

    # Element predicates

    def is_displayed(self, element: WebElement | None) -> bool:
        if element is None:
            return False
        return self._call("is_displayed", element.is_displayed)

    def is_enabled(self, element: WebElement | None) -> bool:
        if element is None:
            return False
        return self._call("is_enabled", element.is_enabled)

    def is_exists(self, element: WebElement | None) -> bool:
        if element is None:
            return False
        try:
            self._call("is_exists", lambda: element.tag_name)
        except ElementStateError:
            return False
        return True

    def is_selected(self, element: WebElement | None) -> bool:
        if element is None:
            return False
        return self._call("is_selected", element.is_selected)

    # Page facts

    def title(self) -> str:
        return self._call("title", lambda: self.driver.title)

    def current_url(self) -> str:
        return self._call("current_url", lambda: self.driver.current_url)

    # Session

    def navigate(self, url: str) -> None:
        logger.info(f"Navigating to {url}")
        self._call("navigate", lambda: self.driver.get(url))

    def quit(self) -> None:
        self._call("quit", self.driver.quit)
        logger.debug("WebDriver session closed")

    def __repr__(self) -> str:
        session_id: Any = getattr(self.driver, "session_id", None)
        return f"SeleniumOracle(session={session_id})"
