import logging
import httpx
from textual.app import ComposeResult
from textual.screen import ModalScreen
from textual.containers import Container, Horizontal
from textual.widgets import Button, Input, Label
from app.models import UserDirectory
from app.validation import ValidationError, validate_user_form
from user import User, UserForm

FIELDS = ("first_name", "last_name", "email")


class UserFormModal(ModalScreen[bool]):
    """Create or edit a user. Dismisses with True once the API accepted the change."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    CSS = """
    UserFormModal {
        align: center middle;
    }
    #dialog {
        layout: vertical;
        padding: 0 1;
        width: 60;
        height: auto;
        border: thick $primary 50%;
        background: $boost;
    }
    #button-container {
        layout: horizontal;
        height: auto;
        margin: 1 0;
    }
    Button {
        width: 1fr;
        margin: 0 1;
    }
    .field-error {
        color: red;
    }
    """

    def __init__(self, directory: UserDirectory, mode: str = "create", user: User | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if mode not in ("create", "edit"):
            raise ValueError(f"Unknown mode: {mode}")
        if mode == "edit" and user is None:
            raise ValueError("A user is required to edit")
        self.directory = directory
        self.mode = mode
        self.user = user
        self.form = UserForm.from_user(user) if user else UserForm()

    def compose(self) -> ComposeResult:
        if self.mode == "edit":
            title = "Edit User"
            description = "Make changes to the user information below."
            submit = "Save Changes"
        else:
            title = "Create New User"
            description = "Enter the details for the new user below."
            submit = "Create User"

        with Container(id="dialog"):
            yield Label(title, id="title")
            yield Label(description)
            yield Label("First Name")
            yield Input(value=self.form.first_name, placeholder="First name", id="first_name-input")
            yield Label("", id="first_name-error", classes="field-error")
            yield Label("Last Name")
            yield Input(value=self.form.last_name, placeholder="Last name", id="last_name-input")
            yield Label("", id="last_name-error", classes="field-error")
            yield Label("Email")
            yield Input(value=self.form.email, placeholder="name@example.com", id="email-input")
            yield Label("", id="email-error", classes="field-error")
            with Horizontal(id="button-container"):
                yield Button(submit, variant="success", id="save")
                yield Button("Cancel", variant="error", id="cancel")

    def read_form(self) -> UserForm:
        return UserForm(
            first_name=self.query_one("#first_name-input", Input).value,
            last_name=self.query_one("#last_name-input", Input).value,
            email=self.query_one("#email-input", Input).value,
        )

    def show_errors(self, errors: dict[str, str]) -> None:
        for name in FIELDS:
            self.query_one(f"#{name}-error", Label).update(errors.get(name, ""))

    async def save(self) -> None:
        self.form = self.read_form()
        errors = validate_user_form(self.form)
        self.show_errors(errors)
        if errors:
            self.log.error(f"Form rejected: {errors}")
            return

        save_button = self.query_one("#save", Button)
        save_button.disabled = True
        try:
            if self.mode == "edit":
                await self.directory.update_user(self.user.id, self.form)
            else:
                await self.directory.create_user(self.form)
        except ValidationError as e:
            self.show_errors(e.errors)
            return
        except httpx.HTTPError as e:
            if self.mode == "edit":
                logging.error(f"Error updating user {self.user.id}: {e}")
                self.notify("There was a problem updating the user. Please try again.", title="Update Failed", severity="error")
            else:
                logging.error(f"Error creating user: {e}")
                self.notify("There was a problem creating the user. Please try again.", title="Creation Failed", severity="error")
            return
        finally:
            save_button.disabled = False

        if self.mode == "edit":
            self.notify("User information has been updated successfully", title="User Updated")
        else:
            self.notify("New user has been added successfully", title="User Created")
        self.dismiss(True)

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "cancel":
            self.dismiss(False)
        elif event.button.id == "save":
            await self.save()

    def action_cancel(self) -> None:
        self.dismiss(False)
