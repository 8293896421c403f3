"""Top-level shape of the ``ora2pg-conf.json`` document.

The configuration document groups ora2pg directives into 21 sections. Unlike
most schema checks, validation here is *order sensitive*: the document's own
key sequence must equal the canonical sequence position by position, with no
missing and no extra keys. Downstream consumers rely on a stable section
order when the document is serialised and rendered.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from itertools import zip_longest
from typing import Any


@dataclass(frozen=True)
class ConfigSection:
    """A top-level section of the configuration document."""

    name: str
    description: str = ""


CONFIG_SECTIONS: tuple[ConfigSection, ...] = (
    ConfigSection("COMMON", "Installation and general behaviour"),
    ConfigSection("INPUT", "Source database connection"),
    ConfigSection("SCHEMA", "Schema selection and naming"),
    ConfigSection("ENCODING", "Client and server encodings"),
    ConfigSection("EXPORT", "Export type and object filters"),
    ConfigSection("FULL_TEXT_SEARCH", "Text search configuration"),
    ConfigSection("DATA_DIFF", "Data diff export"),
    ConfigSection("CONSTRAINT", "Constraint export"),
    ConfigSection("TRIGGERS_AND_SEQUENCES", "Trigger and sequence handling"),
    ConfigSection("OBJECT_MODIFICATION", "Object renaming and replacement"),
    ConfigSection("OUTPUT", "Output files and direct import"),
    ConfigSection("TYPE", "Data type mapping"),
    ConfigSection("GRANT", "Privilege export"),
    ConfigSection("DATA", "Data export tuning"),
    ConfigSection("PERFORMANCE", "Parallelism and batch sizes"),
    ConfigSection("PLSQL", "PL/SQL to PL/pgSQL conversion"),
    ConfigSection("ASSESSMENT", "Migration cost assessment"),
    ConfigSection("POSTGRESQL", "Target PostgreSQL features"),
    ConfigSection("SPATIAL", "Spatial data export"),
    ConfigSection("FDW", "Foreign data wrapper export"),
    ConfigSection("MYSQL", "MySQL source specifics"),
)

CANONICAL_KEYS: tuple[str, ...] = tuple(section.name for section in CONFIG_SECTIONS)


def valid_keys(config_object: Any) -> bool:
    """Return ``True`` if *config_object*'s keys equal ``CANONICAL_KEYS`` in order.

    Missing positions never match and extra trailing keys fail, so this is
    sequence equality rather than set equality.  Non-mapping input is never
    valid.
    """
    if not isinstance(config_object, Mapping):
        return False
    missing = object()
    for expected, actual in zip_longest(CANONICAL_KEYS, config_object, fillvalue=missing):
        if expected != actual:
            return False
    return True


def key_mismatches(config_object: Any) -> list[str]:
    """Describe every way *config_object*'s keys differ from the canonical order.

    Returns an empty list when :func:`valid_keys` would return ``True``.
    """
    if not isinstance(config_object, Mapping):
        return [f"expected a JSON object, got {type(config_object).__name__}"]

    keys = list(config_object)
    problems: list[str] = []
    for index, (expected, actual) in enumerate(zip(CANONICAL_KEYS, keys)):
        if expected != actual:
            problems.append(f"position {index}: expected {expected!r}, found {actual!r}")

    for name in CANONICAL_KEYS[len(keys):]:
        problems.append(f"missing section {name!r}")
    for name in keys[len(CANONICAL_KEYS):]:
        problems.append(f"unexpected section {name!r}")
    return problems
