"""Relations bridging logic variables to facts about the live document."""

from webdriver_logic.relations.modes import Binding, Fresh, Grounded, classify
from webdriver_logic.relations.page import current_urlo, titleo
from webdriver_logic.relations.predicates import (
    displayedo,
    enabledo,
    existso,
    presento,
    selectedo,
    visibleo,
)
from webdriver_logic.relations.properties import (
    attributeo,
    locationo,
    sizeo,
    tago,
    texto,
)
from webdriver_logic.relations.structure import childo

__all__ = [
    # Binding states
    "Binding",
    "Fresh",
    "Grounded",
    "classify",
    # Properties
    "attributeo",
    "locationo",
    "sizeo",
    "tago",
    "texto",
    # Structure
    "childo",
    # Predicates
    "displayedo",
    "enabledo",
    "existso",
    "presento",
    "selectedo",
    "visibleo",
    # Page
    "current_urlo",
    "titleo",
]
