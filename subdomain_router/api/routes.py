from fastapi import APIRouter, Depends, Query, Request

from subdomain_router.multitenancy.deps import SubdomainRequest, require_dynamic_subdomain, url_for
from subdomain_router.schemas.links import AccountLinksOut, AccountOut


router = APIRouter(tags=['accounts'])


@router.get('/links', response_model=AccountLinksOut)
def get_account_links(request: Request, tenant: str | None = Query(default=None)) -> AccountLinksOut:
    return AccountLinksOut(
        default=url_for(request, 'get_account', subdomain=False),
        current=url_for(request, 'get_account', subdomain=None),
        tenant=url_for(request, 'get_account', subdomain=tenant) if tenant else None,
    )


@router.get('/account', response_model=AccountOut)
def get_account(ctx: SubdomainRequest = Depends(require_dynamic_subdomain)) -> AccountOut:
    return AccountOut(subdomain=ctx.subdomains[0].lower(), host=ctx.host)
