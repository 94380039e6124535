"""webdriver-logic - Query live web pages with logic relations.

Relations bridge logic variables to facts about the page open in a browser
session, so questions about the document are answered by the relational
solver instead of imperative polling code.

Library Usage:
    >>> from webdriver_logic import start_session, run, var, attributeo, tago
    >>>
    >>> start_session("http://localhost:5744")
    >>> q = var()
    >>> run(0, q, attributeo(q, "id", "pages-table"))
    >>> run(1, q, tago(q, "a"), texto(q, "Moustache"))
    >>>
    >>> with search_domain(root="css=#content > p *"):
    ...     run(2, q, fresh(lambda el: attributeo(el, q, "external")))

CLI Usage:
    $ webdriver-logic facts http://localhost:5744
    $ webdriver-logic find http://localhost:5744 --tag a --attr class=external
"""

__version__ = "0.1.0"

# Core
from webdriver_logic.core.exceptions import (
    WebDriverLogicError,
    OracleError,
    TransientOracleError,
    ElementStateError,
    UnknownServerError,
    SessionError,
    ScopeError,
)
from webdriver_logic.core.config import Config
from webdriver_logic.core.session import (
    create_driver,
    set_driver,
    start_session,
    end_session,
)

# Browser
from webdriver_logic.browser import (
    BaseOracle,
    SeleniumOracle,
    NO_VALUE,
    Scope,
    QueryContext,
    current_context,
    search_domain,
    set_oracle,
    using_oracle,
    HTML_ATTRIBUTES,
    HTML_TAGS,
)

# Solver
from webdriver_logic.logic import (
    Var,
    var,
    eq,
    lall,
    lany,
    conde,
    fresh,
    run,
    solutions,
)

# Relations
from webdriver_logic.relations import (
    attributeo,
    childo,
    current_urlo,
    displayedo,
    enabledo,
    existso,
    locationo,
    presento,
    selectedo,
    sizeo,
    tago,
    texto,
    titleo,
    visibleo,
)

__all__ = [
    # Version
    "__version__",
    # Core
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
    # Browser
    "BaseOracle",
    "SeleniumOracle",
    "NO_VALUE",
    "Scope",
    "QueryContext",
    "current_context",
    "search_domain",
    "set_oracle",
    "using_oracle",
    "HTML_ATTRIBUTES",
    "HTML_TAGS",
    # Solver
    "Var",
    "var",
    "eq",
    "lall",
    "lany",
    "conde",
    "fresh",
    "run",
    "solutions",
    # Relations
    "attributeo",
    "childo",
    "current_urlo",
    "displayedo",
    "enabledo",
    "existso",
    "locationo",
    "presento",
    "selectedo",
    "sizeo",
    "tago",
    "texto",
    "titleo",
    "visibleo",
]
