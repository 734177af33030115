import logging
import httpx
from textual.app import ComposeResult
from textual.screen import ModalScreen
from textual.containers import Container, Horizontal
from textual.widgets import Button, Label
from app.models import UserDirectory
from user import User


class DeleteUserModal(ModalScreen[bool]):
    BINDINGS = [("escape", "cancel", "Cancel")]

    CSS = """
    DeleteUserModal {
        align: center middle;
    }
    #dialog {
        padding: 1 2;
        width: 56;
        height: auto;
        border: thick $error 80%;
        background: $boost;
    }
    #dialog Label {
        width: 100%;
        text-align: center;
    }
    #warning-text {
        margin: 1 0 0 0;
    }
    #warning-subtext {
        color: $error;
    }
    #button-container {
        height: auto;
        margin: 1 0 0 0;
    }
    #button-container Button {
        width: 1fr;
        margin: 0 1;
    }
    """

    def __init__(self, directory: UserDirectory, user: User, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.directory = directory
        self.user = user

    def compose(self) -> ComposeResult:
        with Container(id="dialog"):
            yield Label("Confirm Deletion", id="title")
            yield Label(f"Are you sure you want to delete {self.user.full_name}?", id="warning-text")
            yield Label("This action cannot be undone.", id="warning-subtext")
            with Horizontal(id="button-container"):
                yield Button("Cancel", variant="primary", id="cancel")
                yield Button("Delete", variant="error", id="confirm")

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "cancel":
            self.dismiss(False)
        elif event.button.id == "confirm":
            confirm = self.query_one("#confirm", Button)
            confirm.disabled = True
            confirm.label = "Deleting..."
            try:
                await self.directory.delete_user(self.user.id)
            except httpx.HTTPError as e:
                logging.error(f"Failed to delete user {self.user.id}: {e}")
                self.notify("There was a problem deleting the user. Please try again.", title="Delete Failed", severity="error")
                confirm.disabled = False
                confirm.label = "Delete"
                return

            logging.info(f"Successfully deleted user: {self.user.full_name}")
            self.notify("User has been removed successfully", title="User Deleted")
            self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
