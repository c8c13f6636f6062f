# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

Role = Literal["employee", "employer"]


class User(TypedDict):
    id: str
    name: str
    email: str
    role: Role


class Account(User):
    password: str


class Session(TypedDict):
    user_id: Optional[str]
