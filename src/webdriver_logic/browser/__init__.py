"""Browser session access: oracle, scopes and query context."""

from webdriver_logic.browser.context import (
    QueryContext,
    active_context,
    current_context,
    search_domain,
    set_context,
    set_oracle,
    using_oracle,
)
from webdriver_logic.browser.oracle import NO_VALUE, BaseOracle, resolve
from webdriver_logic.browser.scope import (
    DEFAULT_CHILD_SCOPE,
    DEFAULT_ROOT_SCOPE,
    Scope,
    as_scope,
)
from webdriver_logic.browser.selenium_oracle import SeleniumOracle
from webdriver_logic.browser.vocabulary import HTML_ATTRIBUTES, HTML_TAGS, is_known_tag

__all__ = [
    # Oracle
    "BaseOracle",
    "SeleniumOracle",
    "NO_VALUE",
    "resolve",
    # Scopes
    "Scope",
    "DEFAULT_ROOT_SCOPE",
    "DEFAULT_CHILD_SCOPE",
    "as_scope",
    # Context
    "QueryContext",
    "active_context",
    "current_context",
    "search_domain",
    "set_context",
    "set_oracle",
    "using_oracle",
    # Vocabularies
    "HTML_ATTRIBUTES",
    "HTML_TAGS",
    "is_known_tag",
]
