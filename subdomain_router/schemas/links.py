from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class AccountLinksOut(BaseSchema):
    default: str
    current: str
    tenant: str | None = None


class AccountOut(BaseSchema):
    subdomain: str
    host: str | None = None
