"""Scope selectors bounding element enumeration."""

from __future__ import annotations

from dataclasses import dataclass

from selenium.webdriver.common.by import By

from webdriver_logic.core.exceptions import ScopeError

# Prefixes accepted by Scope.parse, mapped to Selenium locator strategies
STRATEGIES: dict[str, str] = {
    "xpath": By.XPATH,
    "css": By.CSS_SELECTOR,
    "id": By.ID,
    "name": By.NAME,
    "tag": By.TAG_NAME,
    "class": By.CLASS_NAME,
    "link": By.LINK_TEXT,
    "partial-link": By.PARTIAL_LINK_TEXT,
}


@dataclass(frozen=True)
class Scope:
    """A locator understood by the oracle, e.g. ``Scope(By.XPATH, "//*")``.

    Attributes:
        by: Selenium locator strategy
        value: Locator expression
    """

    by: str
    value: str

    @classmethod
    def xpath(cls, expression: str) -> Scope:
        return cls(By.XPATH, expression)

    @classmethod
    def css(cls, selector: str) -> Scope:
        return cls(By.CSS_SELECTOR, selector)

    @classmethod
    def parse(cls, expression: str) -> Scope:
        """Parse a ``strategy=expression`` string such as ``css=#content > p *``.

        Args:
            expression: Scope expression

        Returns:
            Parsed Scope

        Raises:
            ScopeError: If the strategy is unknown or the expression is empty
        """
        prefix, sep, value = expression.partition("=")
        prefix = prefix.strip().lower()
        if not sep or not value.strip():
            raise ScopeError(
                f"Scope must look like 'strategy=expression': {expression!r}",
                expression=expression,
            )
        if prefix not in STRATEGIES:
            raise ScopeError(
                f"Unknown scope strategy: {prefix}",
                expression=expression,
                details={"known": sorted(STRATEGIES)},
            )
        return cls(STRATEGIES[prefix], value.strip())

    def __str__(self) -> str:
        for prefix, by in STRATEGIES.items():
            if by == self.by:
                return f"{prefix}={self.value}"
        return f"{self.by}={self.value}"


# All elements in the document
DEFAULT_ROOT_SCOPE = Scope.xpath("//*")

# All descendants of a given element
DEFAULT_CHILD_SCOPE = Scope.xpath(".//*")


def as_scope(value: Scope | str) -> Scope:
    """Accept either a Scope or a ``strategy=expression`` string."""
    if isinstance(value, Scope):
        return value
    return Scope.parse(value)
