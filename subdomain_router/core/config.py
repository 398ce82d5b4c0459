from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='ignore',
    )

    APP_ENV: str = 'development'
    DEFAULT_SUBDOMAIN: str | None = None
    BASE_DOMAIN: str | None = None
    TLD_COMPONENTS: int = 1
    KNOWN_SUBDOMAINS: str = ''
    TRUST_PROXY_HEADERS: bool = False

    @field_validator('APP_ENV')
    @classmethod
    def normalize_app_env(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator('TLD_COMPONENTS')
    @classmethod
    def validate_tld_components(cls, value: int) -> int:
        if value < 0:
            raise ValueError('TLD_COMPONENTS must be zero or greater')
        return value

    @model_validator(mode='after')
    def require_base_domain(self) -> 'Settings':
        # Development and test hosts are known; everywhere else the domain must be explicit.
        if self.APP_ENV not in {'development', 'test'} and not self.BASE_DOMAIN:
            raise ValueError(f'BASE_DOMAIN is required when APP_ENV is {self.APP_ENV!r}')
        return self

    @property
    def default_subdomain(self) -> str:
        if self.DEFAULT_SUBDOMAIN is not None:
            return self.DEFAULT_SUBDOMAIN.strip()
        return '' if self.APP_ENV == 'test' else 'www'

    @property
    def domain(self) -> str:
        if self.BASE_DOMAIN:
            return self.BASE_DOMAIN.strip().lower()
        return 'test.host' if self.APP_ENV == 'test' else 'lvh.me'

    @property
    def known_subdomains(self) -> list[str]:
        return [item.strip().lower() for item in self.KNOWN_SUBDOMAINS.split(',') if item.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()

