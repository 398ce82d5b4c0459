from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar, Union

from subdomain_router.multitenancy.config import SubdomainConfig, get_config
from subdomain_router.multitenancy.directive import (
    SUBDOMAIN_KEY,
    Absent,
    Explicit,
    InvalidSubdomainDirective,
    Unset,
    UseDefault,
    directive_from_options,
)


logger = logging.getLogger(__name__)

HOST_KEY = 'host'

HostSource = Union[str, Callable[[], Union[str, None]], None]
T = TypeVar('T')

_NO_OPTIONS = object()


def rewrite_host(host: str, subdomain: str, tld_components: int) -> str:
    labels = host.split('.')
    keep = tld_components + 1
    labels = labels[-keep:] if len(labels) > keep else labels
    labels = [subdomain, *labels]
    return '.'.join(label for label in labels if label and label.strip())


def _resolve_host(options: Mapping[str, Any], current_host: HostSource, config: SubdomainConfig) -> str:
    host = options.get(HOST_KEY)
    if host is not None:
        return host
    if callable(current_host):
        current_host = current_host()
    if current_host is not None:
        return current_host
    return config.domain


def _without_subdomain(options: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in options.items() if key != SUBDOMAIN_KEY}


def rewrite_url_options(
    options: Any,
    current_host: HostSource = None,
    *,
    config: SubdomainConfig | None = None,
) -> Any:
    """
    Apply the ``subdomain`` directive in ``options`` to its ``host``.

    ``None`` keeps the host as supplied, ``False`` switches to the default subdomain and a
    string switches to that subdomain. The host being rewritten is, in order, the ``host``
    option, ``current_host`` (a string or a callable returning one), or the configured domain.
    Options without a ``subdomain`` key, and anything that is not a mapping, are returned as is.

    Raises:
        InvalidSubdomainDirective: the ``subdomain`` value is of any other type.
    """
    if not isinstance(options, Mapping):
        return options

    directive = directive_from_options(options)
    if isinstance(directive, Absent):
        return options
    if isinstance(directive, Unset):
        return _without_subdomain(options)

    if config is None:
        config = get_config()
    if isinstance(directive, UseDefault):
        subdomain = config.default_subdomain
    elif isinstance(directive, Explicit):
        subdomain = directive.label
    else:
        raise InvalidSubdomainDirective(directive)

    host = _resolve_host(options, current_host, config)
    rewritten = _without_subdomain(options)
    rewritten[HOST_KEY] = rewrite_host(host, subdomain, config.tld_components)
    logger.debug('Rewrote host %s -> %s', host, rewritten[HOST_KEY])
    return rewritten


def with_subdomain_host(
    generate: Callable[..., T],
    *,
    current_host: HostSource = None,
    config: SubdomainConfig | None = None,
) -> Callable[..., T]:
    """Wrap a URL generator so it understands the ``subdomain`` option."""

    @functools.wraps(generate)
    def wrapper(options: Any = _NO_OPTIONS, *args: Any, **kwargs: Any) -> T:
        if options is _NO_OPTIONS:
            options = {}
        return generate(rewrite_url_options(options, current_host, config=config), *args, **kwargs)

    return wrapper
