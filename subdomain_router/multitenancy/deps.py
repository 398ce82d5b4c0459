from __future__ import annotations

import ipaddress
import logging
from dataclasses import dataclass
from typing import Any

from fastapi import HTTPException, Request, status

from subdomain_router.core.config import get_settings
from subdomain_router.multitenancy.config import SubdomainConfig, get_config
from subdomain_router.multitenancy.constraint import SubdomainConstraint
from subdomain_router.multitenancy.directive import ABSENT, SUBDOMAIN_KEY, Absent
from subdomain_router.multitenancy.url_rewriting import HOST_KEY, with_subdomain_host


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubdomainRequest:
    host: str | None
    subdomains: tuple[str, ...]
    request: Request | None = None


def _strip_port(host: str) -> str:
    if host.startswith('['):
        return host[1 : host.find(']')] if ']' in host else host
    return host.split(':', 1)[0]


def _is_ip_address(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def get_request_host(request: Request) -> str | None:
    host = request.headers.get('x-forwarded-host') if get_settings().TRUST_PROXY_HEADERS else None
    if host:
        host = host.split(',')[0].strip()
    else:
        host = request.headers.get('host')
    if not host:
        return None
    return _strip_port(host)


def split_subdomains(host: str | None, tld_components: int) -> tuple[str, ...]:
    if not host or _is_ip_address(host):
        return ()
    labels = host.split('.')
    keep = tld_components + 1
    if len(labels) <= keep:
        return ()
    return tuple(labels[:-keep])


def subdomain_request(request: Request, config: SubdomainConfig | None = None) -> SubdomainRequest:
    if config is None:
        config = get_config()
    host = get_request_host(request)
    return SubdomainRequest(host=host, subdomains=split_subdomains(host, config.tld_components), request=request)


def require_dynamic_subdomain(request: Request) -> SubdomainRequest:
    wrapped = subdomain_request(request)
    if not SubdomainConstraint().matches(wrapped):
        logger.debug('No dynamic subdomain for host %s', wrapped.host)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Not found')
    return wrapped


def _build_url(options: dict[str, Any], request: Request) -> str:
    url = request.url_for(options['name'], **options.get('path_params', {}))
    host = options.get(HOST_KEY)
    if host:
        url = url.replace(hostname=host)
    return str(url)


def url_for(
    request: Request,
    name: str,
    *,
    subdomain: Any = ABSENT,
    host: str | None = None,
    **path_params: Any,
) -> str:
    """
    Absolute URL for the route ``name``, optionally moved to another subdomain.

    ``subdomain`` takes the same values as the ``subdomain`` URL option: ``None`` keeps the
    host, ``False`` uses the default subdomain and a string routes to that subdomain.
    """
    options: dict[str, Any] = {'name': name, 'path_params': path_params}
    if host is not None:
        options[HOST_KEY] = host
    if not isinstance(subdomain, Absent):
        options[SUBDOMAIN_KEY] = subdomain

    def current_host() -> str | None:
        request_host = get_request_host(request)
        return request_host.lower() if request_host else request_host

    generate = with_subdomain_host(_build_url, current_host=current_host)
    return generate(options, request)
