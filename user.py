#########################################
# User Directory Console
#
# Description: This file describes the user dataclasses shared by the
# API client, the directory state and the screens.
#########################################

from dataclasses import dataclass, asdict
from urllib.parse import quote_plus

AVATAR_URL = "https://ui-avatars.com/api/?name={first}+{last}"


@dataclass
class User:
    id: int
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    avatar: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "User":
        return cls(
            id=int(data["id"]),
            email=data.get("email", ""),
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            avatar=data.get("avatar", ""),
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def matches(self, query: str) -> bool:
        needle = query.lower()
        return (
            needle in self.first_name.lower()
            or needle in self.last_name.lower()
            or needle in self.email.lower()
        )


@dataclass
class UserForm:
    first_name: str = ""
    last_name: str = ""
    email: str = ""

    @classmethod
    def from_user(cls, user: User) -> "UserForm":
        return cls(first_name=user.first_name, last_name=user.last_name, email=user.email)

    def to_payload(self) -> dict:
        return asdict(self)


@dataclass
class UserPage:
    users: list[User]
    page: int = 1
    total_pages: int = 1
    per_page: int | None = None
    total: int | None = None

    @classmethod
    def from_api(cls, data: dict, page: int) -> "UserPage":
        return cls(
            users=[User.from_api(item) for item in data.get("data", [])],
            page=int(data.get("page", page)),
            total_pages=int(data.get("total_pages", 1)),
            per_page=data.get("per_page"),
            total=data.get("total"),
        )


def avatar_url(first_name: str, last_name: str) -> str:
    # The create endpoint does not return an avatar, so one is synthesized
    return AVATAR_URL.format(first=quote_plus(first_name), last=quote_plus(last_name))
