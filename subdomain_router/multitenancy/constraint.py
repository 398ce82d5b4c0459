from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Protocol

from subdomain_router.multitenancy.config import SubdomainConfig, get_config


logger = logging.getLogger(__name__)


class HasSubdomains(Protocol):
    subdomains: Sequence[str]


class SubdomainConstraint:
    """
    Route guard that only lets through requests on a dynamic (tenant) subdomain.

    A request matches when it has exactly one subdomain label, that label is not the
    default subdomain, and the configured matcher accepts its lower-cased form.
    Without an explicit ``config`` the process-wide snapshot is read on every call.
    """

    def __init__(self, config: SubdomainConfig | None = None):
        self._config = config

    @property
    def config(self) -> SubdomainConfig:
        return self._config if self._config is not None else get_config()

    def matches(self, request: HasSubdomains) -> bool:
        subdomains = list(request.subdomains)
        if len(subdomains) != 1:
            return False

        config = self.config
        label = subdomains[0]
        if label == config.default_subdomain:
            return False

        matched = config.subdomain_matcher(label.lower(), request)
        logger.debug('Subdomain %r matched=%s', label, matched)
        return matched

    def __call__(self, request: HasSubdomains) -> bool:
        return self.matches(request)


def has_dynamic_subdomain(request: Any, config: SubdomainConfig | None = None) -> bool:
    return SubdomainConstraint(config).matches(request)
