# -*- coding: utf-8 -*-
"""
Data Model
==========

Records produced by the extraction core.

A ``TextPair`` is one parsed ``lang(native, localized)`` call. A
``CreatureRecord`` gathers the name and the flavor texts of one creature.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Tuple


class TextPair(NamedTuple):
    """Native and localized text taken from one language call."""
    native: str
    localized: str


@dataclass(frozen=True)
class FlavorField:
    """A flavor mode of the script and where its texts land in the sheet."""
    token: str              # mode token in the script, e.g. FLAVOR_PASSIVE
    name: str               # canonical field name, e.g. calm
    localized_column: int   # 1-based spreadsheet column
    native_column: int


FLAVOR_FIELDS: Tuple[FlavorField, ...] = (
    FlavorField("FLAVOR_PASSIVE", "calm", 4, 9),
    FlavorField("FLAVOR_WELCOME", "fov", 5, 10),
    FlavorField("FLAVOR_ANGERED", "aggro", 6, 11),
    FlavorField("FLAVOR_DEATH", "dead", 7, 12),
    FlavorField("FLAVOR_KILL", "kill", 8, 13),
)

FLAVOR_BY_TOKEN: Dict[str, FlavorField] = {f.token: f for f in FLAVOR_FIELDS}
FLAVOR_NAMES: Tuple[str, ...] = tuple(f.name for f in FLAVOR_FIELDS)

# Mode that carries the creature name
NAME_MODE = "SET"


@dataclass
class CreatureRecord:
    """Name and flavor texts of one creature."""
    id: str
    name: Tuple[str, ...] = ()
    flavor_texts: Dict[str, List[TextPair]] = field(default_factory=dict)

    @property
    def native_name(self) -> str:
        return self.name[0] if self.name else ""

    @property
    def localized_name(self) -> str:
        return self.name[1] if self.name else ""

    def has_flavor_texts(self) -> bool:
        return len(self.flavor_texts) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': list(self.name),
            'flavor_texts': {
                key: [list(pair) for pair in pairs]
                for key, pairs in self.flavor_texts.items()
            },
        }
