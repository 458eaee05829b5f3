from typing import Annotated
from datetime import datetime
from pydantic import AfterValidator, BaseModel, Field
from pydantic.networks import validate_email

NameStr = Annotated[str, Field(min_length=1, max_length=255)]


def _email_format(v: str) -> str:
    # Check the format but keep the address exactly as sent (no domain lowercasing)
    validate_email(v)
    return v

RawEmail = Annotated[str, Field(max_length=255), AfterValidator(_email_format)]

class UserCreate(BaseModel):
    email: RawEmail
    password: Annotated[str, Field(min_length=6, max_length=256)]
    name: NameStr

class UserLogin(BaseModel):
    email: RawEmail
    password: str

class UserRead(BaseModel):
    # Every stored column goes back to the caller, password_hash included
    id: int
    email: str
    password_hash: str
    name: str
    created_at: datetime

    model_config = {"from_attributes": True}
