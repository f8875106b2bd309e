from enum import Enum

from pydantic import BaseModel


class Role(str, Enum):
    CUSTOMER = "customer"
    ADMINISTRATOR = "administrator"


class AuthMode(str, Enum):
    SIGN_UP = "sign-up"
    SIGN_IN = "sign-in"


class Credentials(BaseModel):
    email: str = ""
    password: str = ""
    # Only required on sign-up
    name: str = ""


class Identity(BaseModel):
    name: str
    email: str
    role: Role = Role.CUSTOMER

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMINISTRATOR
