import logging
import httpx
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Input, Button, Static
from textual.containers import Container, Vertical, Center
from app.session import AuthError, AuthSession


class LoginScreen(Screen):
    BINDINGS = [
        ("escape", "clear_form", "Clear the form"),
    ]

    CSS = """
    Container.center-container {
        height: 1fr;
        align: center middle;
    }

    Static.title {
        text-align: center;
    }
    Vertical {
        align: center middle;
        width: 50%;
        height: auto;
        background: $panel;
        border: tall $primary;
        padding: 2;
    }
    Input { margin: 1; width: 100%; }
    Button { width: 100%; margin: 1; }
    Static#message { margin: 1; color: $error; }
    """

    def __init__(self, session: AuthSession, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.session = session

    def compose(self) -> ComposeResult:
        with Container(classes="center-container"):
            with Vertical():
                yield Static("User Management Login", id="title", classes="title")
                yield Input(placeholder="Email", id="email")
                yield Input(placeholder="Password", password=True, id="password")
                with Center():
                    yield Button("Login", id="login", variant="primary")
                yield Static("", id="message")

    def on_mount(self) -> None:
        self.query_one("#email", Input).focus()

    async def submit(self) -> None:
        message = self.query_one("#message", Static)
        email = self.query_one("#email", Input).value.strip()
        password = self.query_one("#password", Input).value

        if not email or not password:
            message.update("Please fill in both fields.")
            self.log.error("Email or password missing")
            return

        login_button = self.query_one("#login", Button)
        login_button.disabled = True
        login_button.label = "Logging in..."
        try:
            await self.session.login(email, password)
        except (httpx.HTTPError, AuthError) as e:
            logging.error(f"Login failed for {email}: {e}")
            message.update("Invalid email or password. Please try again.")
            self.notify("Invalid email or password. Please try again.", title="Login Failed", severity="error")
            return
        finally:
            login_button.disabled = False
            login_button.label = "Login"

        self.notify("Welcome back!", title="Login Successful")
        self.app.show_users()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "login":
            await self.submit()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "email":
            self.query_one("#password", Input).focus()
        elif event.input.id == "password":
            await self.submit()

    def action_clear_form(self) -> None:
        self.query_one("#email", Input).value = ""
        self.query_one("#password", Input).value = ""
        self.query_one("#message", Static).update("")
        self.query_one("#email", Input).focus()
