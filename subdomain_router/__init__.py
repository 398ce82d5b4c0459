from subdomain_router.multitenancy.config import (
    SubdomainConfig,
    configure,
    get_config,
    known_subdomains_matcher,
    reject_all,
    reset_config,
    set_config,
)
from subdomain_router.multitenancy.constraint import SubdomainConstraint, has_dynamic_subdomain
from subdomain_router.multitenancy.directive import (
    Absent,
    Explicit,
    InvalidSubdomainDirective,
    SubdomainDirective,
    Unset,
    UseDefault,
)
from subdomain_router.multitenancy.url_rewriting import rewrite_host, rewrite_url_options, with_subdomain_host


__all__ = [
    'Absent',
    'Explicit',
    'InvalidSubdomainDirective',
    'SubdomainConfig',
    'SubdomainConstraint',
    'SubdomainDirective',
    'Unset',
    'UseDefault',
    'configure',
    'get_config',
    'has_dynamic_subdomain',
    'known_subdomains_matcher',
    'reject_all',
    'reset_config',
    'rewrite_host',
    'rewrite_url_options',
    'set_config',
    'with_subdomain_host',
]
