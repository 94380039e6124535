"""Pytest configuration and fixtures for webdriver-logic tests.

Relations are exercised against an in-memory oracle that models the
reference page ("Ministache") and its example form page.
"""

import os
import re
import sys
from typing import Any

import pytest
from selenium.webdriver.common.by import By

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from webdriver_logic.browser.context import QueryContext, set_context, using_oracle  # noqa: E402
from webdriver_logic.browser.oracle import BaseOracle  # noqa: E402
from webdriver_logic.browser.scope import Scope  # noqa: E402
from webdriver_logic.core.exceptions import OracleError  # noqa: E402

BASE_URL = "http://localhost:5744/"
FORM_URL = "http://localhost:5744/example-form"


class FakeElement:
    """A node in the fake document. Compared by identity only."""

    def __init__(
        self,
        tag: str,
        attrs: dict[str, str] | None = None,
        text: str = "",
        children: list["FakeElement"] | None = None,
        size: dict[str, int] | None = None,
        location: dict[str, int] | None = None,
        displayed: bool = True,
        enabled: bool = True,
        selected: bool = False,
    ) -> None:
        self.tag = tag
        self.attrs = attrs or {}
        self.text = text
        self.children = children or []
        self.size = size or {"width": 100, "height": 20}
        self.location = location or {"x": 0, "y": 0}
        self.displayed = displayed
        self.enabled = enabled
        self.selected = selected
        self.detached = False
        self.fault: Exception | None = None

    def descendants(self) -> list["FakeElement"]:
        result = []
        for child in self.children:
            result.append(child)
            result.extend(child.descendants())
        return result

    def walk(self) -> list["FakeElement"]:
        return [self, *self.descendants()]

    def __repr__(self) -> str:
        ident = self.attrs.get("id") or self.attrs.get("class") or self.text[:15]
        return f"<{self.tag} {ident}>"


_COMPOUND = re.compile(r"(#|\.)([\w-]+)|\[([\w-]+)='([^']*)'\]")


def matches(element: FakeElement, compound: str) -> bool:
    """Match a simple CSS compound selector such as ``a.external`` or ``#content``."""
    tag = re.match(r"^[a-z0-9]+|^\*", compound)
    if tag and tag.group(0) not in ("*", element.tag):
        return False
    for prefix, name, attr, value in _COMPOUND.findall(compound):
        if prefix == "#" and element.attrs.get("id") != name:
            return False
        if prefix == "." and name not in element.attrs.get("class", "").split():
            return False
        if attr and element.attrs.get(attr) != value:
            return False
    return True


class FakeOracle(BaseOracle):
    """In-memory oracle recording every call it receives."""

    name = "fake"

    def __init__(self, root: FakeElement, title: str, url: str) -> None:
        self.root = root
        self._title = title
        self._url = url
        self.calls: list[str] = []
        self.quit_called = False

    def _check(self, operation: str, element: Any) -> None:
        self.calls.append(operation)
        if element is not None and element.fault is not None:
            raise element.fault

    def _order(self, elements: list[FakeElement]) -> list[FakeElement]:
        document = self.root.walk()
        unique = {id(e): e for e in elements}
        return sorted(unique.values(), key=lambda e: next(i for i, d in enumerate(document) if d is e))

    def _css(self, selector: str, pool: list[FakeElement]) -> list[FakeElement]:
        tokens = selector.split()
        current = [e for e in pool if matches(e, tokens[0])]
        i = 1
        while i < len(tokens):
            if tokens[i] == ">":
                current = [c for e in current for c in e.children if matches(c, tokens[i + 1])]
                i += 2
            else:
                current = [d for e in current for d in e.descendants() if matches(d, tokens[i])]
                i += 1
        return self._order(current)

    def _select(self, scope: Scope, base: FakeElement | None) -> list[FakeElement]:
        pool = base.descendants() if base is not None else self.root.walk()
        if scope.by == By.XPATH and scope.value in ("//*", ".//*"):
            return pool
        if scope.by == By.TAG_NAME:
            return [e for e in pool if e.tag == scope.value]
        if scope.by == By.ID:
            return [e for e in pool if e.attrs.get("id") == scope.value]
        if scope.by == By.CLASS_NAME:
            return [e for e in pool if scope.value in e.attrs.get("class", "").split()]
        if scope.by == By.CSS_SELECTOR:
            return self._css(scope.value, pool)
        raise OracleError(f"Unsupported scope: {scope}", operation="find_elements")

    def find_elements(self, scope: Scope) -> list[FakeElement]:
        self.calls.append("find_elements")
        return self._select(scope, None)

    def find_child_elements(self, parent: FakeElement, scope: Scope) -> list[FakeElement]:
        self._check("find_child_elements", parent)
        return self._select(scope, parent)

    def attribute(self, element: FakeElement, name: str) -> str | None:
        self._check("attribute", element)
        return element.attrs.get(name)

    def tag(self, element: FakeElement) -> str:
        self._check("tag", element)
        return element.tag

    def text(self, element: FakeElement) -> str:
        self._check("text", element)
        return element.text

    def size(self, element: FakeElement) -> dict[str, int]:
        self._check("size", element)
        return dict(element.size)

    def location(self, element: FakeElement) -> dict[str, int]:
        self._check("location", element)
        return dict(element.location)

    def is_displayed(self, element: FakeElement | None) -> bool:
        self._check("is_displayed", element)
        return element is not None and element.displayed

    def is_enabled(self, element: FakeElement | None) -> bool:
        self._check("is_enabled", element)
        return element is not None and element.enabled

    def is_exists(self, element: FakeElement | None) -> bool:
        self.calls.append("is_exists")
        return element is not None and not element.detached

    def is_selected(self, element: FakeElement | None) -> bool:
        self._check("is_selected", element)
        return element is not None and element.selected

    def title(self) -> str:
        self.calls.append("title")
        return self._title

    def current_url(self) -> str:
        self.calls.append("current_url")
        return self._url

    def navigate(self, url: str) -> None:
        self._url = url

    def quit(self) -> None:
        self.quit_called = True

    def css(self, selector: str) -> FakeElement | None:
        """Test shortcut for the first element matching a CSS selector."""
        return self.find_element(Scope.css(selector))


def build_home_page() -> FakeElement:
    """The reference page: title "Ministache", a pages table and external links."""
    return FakeElement("html", children=[
        FakeElement("head", displayed=False, children=[
            FakeElement("title", text="Ministache", displayed=False),
        ]),
        FakeElement("body", text="Ministache", children=[
            FakeElement("div", {"id": "content"}, text="Ministache", children=[
                FakeElement("a", {"href": "#pages"}, displayed=False),
                FakeElement("h1", text="Ministache"),
                FakeElement("p", text="Moustache is amazing! Built with clj-webdriver.", children=[
                    FakeElement("a", {"class": "external", "href": "https://github.com/moustache"}, text="Moustache"),
                    FakeElement("span", {"class": "external"}, text="is amazing!"),
                    FakeElement("a", {"class": "external", "href": "https://github.com/semperos/clj-webdriver"},
                                text="clj-webdriver"),
                ]),
                FakeElement("p", text="Created by Stuart", children=[
                    FakeElement("a", {"class": "external", "href": "https://github.com/stuart"}, text="Stuart"),
                ]),
                FakeElement("a", {"href": "https://example.com/"}, text="is amazing!"),
                FakeElement("div", {"id": "pages"}, children=[
                    FakeElement(
                        "table",
                        {"id": "pages-table"},
                        text="Page one",
                        size={"width": 567, "height": 105},
                        location={"x": 37, "y": 295},
                        children=[
                            FakeElement("tr", children=[FakeElement("td", text="Page one")]),
                        ],
                    ),
                ]),
                FakeElement("a", {"href": "/example-form"}, text="example form"),
            ]),
        ]),
    ])


def build_form_page() -> FakeElement:
    """The example form page: inputs, a disabled field and a countries select list."""
    return FakeElement("html", children=[
        FakeElement("body", children=[
            FakeElement("form", {"id": "example_form"}, children=[
                FakeElement("input", {"id": "first_name", "type": "text"}),
                FakeElement("input", {"id": "disabled_field", "type": "text"}, enabled=False),
                FakeElement("select", {"id": "countries"}, children=[
                    FakeElement("option", {"value": "ayiti"}, text="Ayiti"),
                    FakeElement("option", {"value": "bharat", "selected": "selected"}, text="Bharat",
                                selected=True),
                    FakeElement("option", {"value": "nihon"}, text="Nihon"),
                ]),
                FakeElement("input", {"id": "subscribe", "type": "checkbox", "checked": "checked"},
                            selected=True),
                FakeElement("button", {"type": "submit"}, text="Submit"),
            ]),
        ]),
    ])


@pytest.fixture(autouse=True)
def reset_context():
    """Start and finish every test without an ambient session."""
    set_context(QueryContext())
    yield
    set_context(QueryContext())


@pytest.fixture
def home_oracle() -> FakeOracle:
    return FakeOracle(build_home_page(), "Ministache", BASE_URL)


@pytest.fixture
def page(home_oracle):
    """The reference page installed as the ambient session."""
    with using_oracle(home_oracle):
        yield home_oracle


@pytest.fixture
def form_page():
    """The example form page installed as the ambient session."""
    oracle = FakeOracle(build_form_page(), "Example Form", FORM_URL)
    with using_oracle(oracle):
        yield oracle
