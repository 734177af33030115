import logging
from textual.app import App, ComposeResult
from textual.widgets import Header
from app.models import UserDirectory
from app.session import AuthSession
from screens.login import LoginScreen
from screens.users import UsersScreen


class UserConsoleApp(App):
    TITLE = "User Management"
    BINDINGS = [("d", "toggle_dark", "Toggle dark mode")]

    def __init__(self, session: AuthSession, allow_create: bool = True, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.session = session
        self.allow_create = allow_create

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

    def on_mount(self) -> None:
        # A stored token from a previous run skips the login screen
        if self.session.is_authenticated():
            logging.info("Stored session found, opening user list")
            self.push_screen(self.users_screen())
        else:
            self.push_screen(LoginScreen(self.session))

    def users_screen(self) -> UsersScreen:
        return UsersScreen(UserDirectory(self.session.api), allow_create=self.allow_create)

    def show_users(self) -> None:
        self.switch_screen(self.users_screen())

    def logout(self) -> None:
        self.session.logout()
        self.notify("You have been logged out successfully", title="Logged Out")
        self.switch_screen(LoginScreen(self.session))

    def action_logout(self) -> None:
        self.logout()

    def action_toggle_dark(self) -> None:
        self.theme = (
            "textual-dark" if self.theme == "textual-light" else "textual-light"
        )

    async def on_unmount(self) -> None:
        await self.session.api.aclose()
