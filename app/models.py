import logging
import httpx
from dataclasses import dataclass, field, replace
from app.api import ApiClient
from app.validation import ValidationError, validate_user_form
from user import User, UserForm, avatar_url


def filter_users(users: list[User], query: str) -> list[User]:
    if not query:
        return list(users)
    return [user for user in users if user.matches(query)]


@dataclass
class UserDirectory:
    """The currently loaded page of users and the operations that change it.

    Mutations patch the in-memory page after the API call succeeds and never
    re-fetch, so the page can drift from what the server actually stored.
    """
    api: ApiClient
    users: list[User] = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 1
    search_query: str = ""

    async def fetch_users(self, page: int) -> None:
        result = await self.api.get_users(page)
        # Only a successful fetch touches the list and counters
        self.users = result.users
        self.total_pages = result.total_pages
        self.current_page = result.page
        self.search_query = ""
        logging.info(f"Loaded page {self.current_page} of {self.total_pages} ({len(self.users)} users)")

    def search(self, query: str) -> list[User]:
        self.search_query = query
        return self.visible_users()

    def visible_users(self) -> list[User]:
        return filter_users(self.users, self.search_query)

    def get_user(self, user_id: int) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def clamp_page(self, page: int) -> int:
        return max(1, min(page, self.total_pages))

    async def update_user(self, user_id: int, form: UserForm) -> None:
        errors = validate_user_form(form)
        if errors:
            raise ValidationError(errors)
        await self.api.update_user(user_id, form)
        self.users = [
            replace(u, first_name=form.first_name, last_name=form.last_name, email=form.email)
            if u.id == user_id else u
            for u in self.users
        ]
        logging.info(f"Updated user id={user_id}")

    async def create_user(self, form: UserForm) -> User:
        errors = validate_user_form(form)
        if errors:
            raise ValidationError(errors)
        data = await self.api.create_user(form)
        try:
            new_id = int(data["id"])
        except (KeyError, TypeError, ValueError) as e:
            raise httpx.DecodingError(f"Create response did not include a usable id: {data!r}") from e
        new_user = User(
            id=new_id,
            first_name=form.first_name,
            last_name=form.last_name,
            email=form.email,
            avatar=avatar_url(form.first_name, form.last_name),
        )
        self.users = [new_user, *self.users]
        logging.info(f"Created user id={new_user.id}")
        return new_user

    async def delete_user(self, user_id: int) -> None:
        await self.api.delete_user(user_id)
        self.users = [u for u in self.users if u.id != user_id]
        logging.info(f"Deleted user id={user_id}")
