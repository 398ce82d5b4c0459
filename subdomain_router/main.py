from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from subdomain_router.api.routes import router
from subdomain_router.multitenancy.config import get_config


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    config = get_config()
    logger.info(
        'Subdomain routing on %s (default subdomain %r, tld components %s)',
        config.domain,
        config.default_subdomain,
        config.tld_components,
    )
    yield


app = FastAPI(
    title='Subdomain Router Demo',
    version='0.1.0',
    lifespan=lifespan,
)

app.include_router(router)


@app.get('/')
def root() -> dict[str, str]:
    return {'service': 'subdomain-router', 'status': 'running'}
