from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union


SUBDOMAIN_KEY = 'subdomain'


class InvalidSubdomainDirective(ValueError):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f'subdomain must be None, False, or a string (got {value!r})')


@dataclass(frozen=True)
class Absent:
    """No ``subdomain`` option was given; options pass through untouched."""


@dataclass(frozen=True)
class Unset:
    """``subdomain=None``: drop the option and keep the host as supplied."""


@dataclass(frozen=True)
class UseDefault:
    """``subdomain=False``: route to the configured default subdomain."""


@dataclass(frozen=True)
class Explicit:
    label: str


SubdomainDirective = Union[Absent, Unset, UseDefault, Explicit]

ABSENT = Absent()
UNSET = Unset()
USE_DEFAULT = UseDefault()


def coerce_directive(value: Any) -> Unset | UseDefault | Explicit:
    if isinstance(value, (Unset, UseDefault, Explicit)):
        return value
    if value is None:
        return UNSET
    if value is False:
        return USE_DEFAULT
    if isinstance(value, str):
        return Explicit(value)
    raise InvalidSubdomainDirective(value)


def directive_from_options(options: Mapping[str, Any]) -> SubdomainDirective:
    if SUBDOMAIN_KEY not in options:
        return ABSENT
    return coerce_directive(options[SUBDOMAIN_KEY])
