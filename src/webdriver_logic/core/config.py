"""Configuration management for webdriver-logic."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from webdriver_logic.browser.context import QueryContext
from webdriver_logic.browser.oracle import BaseOracle
from webdriver_logic.browser.scope import Scope
from webdriver_logic.core.exceptions import ScopeError

load_dotenv()

SUPPORTED_BROWSERS = ("chrome", "firefox", "edge")


@dataclass
class Config:
    """Global configuration for webdriver-logic.

    All values can be overridden via environment variables with WDL_ prefix.
    Example: WDL_ROOT_SCOPE="css=#content *"
    """

    # Browser Settings
    browser: str = field(default_factory=lambda: os.environ.get("WDL_BROWSER", "chrome"))
    headless: bool = field(
        default_factory=lambda: os.environ.get("WDL_HEADLESS", "true").lower() == "true"
    )
    base_url: str = field(default_factory=lambda: os.environ.get("WDL_BASE_URL", ""))
    page_load_timeout: float = field(
        default_factory=lambda: float(os.environ.get("WDL_PAGE_LOAD_TIMEOUT", "30.0"))
    )
    implicit_wait: float = field(
        default_factory=lambda: float(os.environ.get("WDL_IMPLICIT_WAIT", "0.0"))
    )

    # Enumeration Scopes
    root_scope: str = field(default_factory=lambda: os.environ.get("WDL_ROOT_SCOPE", "xpath=//*"))
    child_scope: str = field(
        default_factory=lambda: os.environ.get("WDL_CHILD_SCOPE", "xpath=.//*")
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.environ.get("WDL_LOG_LEVEL", "INFO"))

    def validate(self) -> None:
        """Validate the configuration.

        Raises:
            ValueError: If the browser is unsupported or a scope is malformed.
        """
        if self.browser.lower() not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser: {self.browser}. "
                f"Choose one of: {', '.join(SUPPORTED_BROWSERS)}"
            )
        for name in ("root_scope", "child_scope"):
            try:
                Scope.parse(getattr(self, name))
            except ScopeError as e:
                raise ValueError(f"Invalid {name}: {e}") from e

    def query_context(self, oracle: BaseOracle | None = None) -> QueryContext:
        """Build a QueryContext from the configured scopes.

        Args:
            oracle: Browser session to attach

        Returns:
            QueryContext using this configuration's scopes
        """
        return QueryContext(
            oracle=oracle,
            root_scope=Scope.parse(self.root_scope),
            child_scope=Scope.parse(self.child_scope),
        )

    @classmethod
    def from_env(cls) -> "Config":
        """Create a Config instance from environment variables.

        Returns:
            Config instance with values from environment.
        """
        return cls()
