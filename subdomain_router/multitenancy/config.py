from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from typing import Any

from subdomain_router.core.config import Settings, get_settings


logger = logging.getLogger(__name__)

SubdomainMatcher = Callable[[str, Any], bool]


def reject_all(subdomain: str, request: Any) -> bool:
    return False


def known_subdomains_matcher(labels: Iterable[str]) -> SubdomainMatcher:
    known = frozenset(label.strip().lower() for label in labels if label.strip())

    def matcher(subdomain: str, request: Any) -> bool:
        return subdomain in known

    return matcher


@dataclass(frozen=True)
class SubdomainConfig:
    default_subdomain: str = ''
    domain: str = ''
    tld_components: int = 1
    subdomain_matcher: SubdomainMatcher = reject_all

    def __post_init__(self) -> None:
        if self.tld_components < 0:
            raise ValueError(f'tld_components must be zero or greater, got {self.tld_components}')


def config_from_settings(settings: Settings) -> SubdomainConfig:
    matcher = known_subdomains_matcher(settings.known_subdomains) if settings.known_subdomains else reject_all
    return SubdomainConfig(
        default_subdomain=settings.default_subdomain,
        domain=settings.domain,
        tld_components=settings.TLD_COMPONENTS,
        subdomain_matcher=matcher,
    )


_lock = threading.Lock()
_current: SubdomainConfig | None = None


def get_config() -> SubdomainConfig:
    """Return the process-wide configuration snapshot, building it from settings on first use."""
    global _current  # noqa: PLW0603
    config = _current
    if config is None:
        with _lock:
            if _current is None:
                _current = config_from_settings(get_settings())
            config = _current
    return config


def set_config(config: SubdomainConfig) -> SubdomainConfig:
    global _current  # noqa: PLW0603
    with _lock:
        _current = config
    logger.debug('Subdomain config replaced: domain=%s tld_components=%s', config.domain, config.tld_components)
    return config


def configure(**changes: Any) -> SubdomainConfig:
    """
    Swap in a copy of the current snapshot with ``changes`` applied.

    Readers never see a half-updated configuration: the new value is built first and
    published with a single assignment.
    """
    global _current  # noqa: PLW0603
    base = get_config()
    with _lock:
        _current = replace(_current or base, **changes)
        config = _current
    logger.debug('Subdomain config updated: %s', ', '.join(sorted(changes)))
    return config


def reset_config() -> SubdomainConfig:
    return set_config(config_from_settings(get_settings()))
