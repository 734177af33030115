import logging
import httpx
from textual import work
from textual.app import ComposeResult
from textual.screen import Screen
from textual.containers import Container, Horizontal
from textual.widgets import Header, Footer, DataTable, Button, Input, Label, Static
from app.models import UserDirectory
from modals.delete_user_modal import DeleteUserModal
from modals.user_form_modal import UserFormModal
from user import User


class UserTable(DataTable):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.cursor_type = "row"

    def on_mount(self) -> None:
        self.add_columns("ID", "Name", "Email", "Avatar")

    def show_users(self, users: list[User]) -> None:
        self.clear()
        for user in users:
            self.add_row(str(user.id), user.full_name, user.email, user.avatar, key=str(user.id))


class UsersScreen(Screen):
    """Paged user list with search and the create/edit/delete dialogs.

    With allow_create=False the screen is a read-and-edit view: the create
    button is not rendered and the create binding is disabled.
    """

    BINDINGS = [
        ("c", "create_user", "Create user"),
        ("e", "edit_user", "Edit user"),
        ("D", "delete_user", "Delete user"),
        ("n", "next_page", "Next page"),
        ("p", "previous_page", "Previous page"),
        ("/", "focus_search", "Search"),
        ("ctrl+l", "app.logout", "Logout"),
    ]
    CSS = """
    #toolbar, #pagination {
        height: auto;
        margin: 0 1;
    }
    #search {
        width: 1fr;
    }
    #page-label {
        width: 1fr;
        content-align: center middle;
        height: 3;
    }
    #user-list {
        height: 1fr;
        border: solid $primary;
    }
    UserTable {
        height: 1fr;
    }
    #empty {
        color: $text-muted;
        padding: 1 2;
    }
    .hidden {
        display: none;
    }
    """

    def __init__(self, directory: UserDirectory, allow_create: bool = True, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.directory = directory
        self.allow_create = allow_create
        self.selected_user_id: int | None = None
        self.loading_page = False

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="toolbar"):
            yield Input(placeholder="Search users...", id="search")
            if self.allow_create:
                yield Button("Create User", variant="success", id="create")
            yield Button("Logout", id="logout")
        with Horizontal(id="pagination"):
            yield Button("Previous", id="previous", disabled=True)
            yield Label("Page 1 of 1", id="page-label")
            yield Button("Next", id="next", disabled=True)
        with Container(id="user-list"):
            yield UserTable(id="users")
            yield Static("No users found matching your search criteria.", id="empty", classes="hidden")
        yield Footer()

    def on_mount(self) -> None:
        self.title = "User Management"
        self.query_one(UserTable).focus()
        self.load_page(self.directory.current_page)

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        if action == "create_user" and not self.allow_create:
            return False
        return True

    @work(exclusive=True, group="fetch")
    async def load_page(self, page: int) -> None:
        table = self.query_one(UserTable)
        self.loading_page = True
        table.loading = True
        self.update_pagination()
        try:
            await self.directory.fetch_users(page)
        except httpx.HTTPError as e:
            logging.error(f"Error fetching users for page {page}: {e}")
            self.notify(
                "There was a problem loading the user data. Please try again.",
                title="Error Fetching Users",
                severity="error",
            )
        finally:
            self.loading_page = False
            table.loading = False

        search = self.query_one("#search", Input)
        if search.value != self.directory.search_query:
            search.value = self.directory.search_query
        self.refresh_users()

    def refresh_users(self) -> None:
        visible = self.directory.visible_users()
        self.query_one(UserTable).show_users(visible)
        self.query_one("#empty", Static).set_class(bool(visible), "hidden")
        if self.selected_user_id is not None and self.directory.get_user(self.selected_user_id) is None:
            self.selected_user_id = None
        self.update_pagination()

    def update_pagination(self) -> None:
        self.query_one("#page-label", Label).update(
            f"Page {self.directory.current_page} of {self.directory.total_pages}"
        )
        self.query_one("#previous", Button).disabled = self.loading_page or not self.directory.has_previous
        self.query_one("#next", Button).disabled = self.loading_page or not self.directory.has_next

    def selected_user(self) -> User | None:
        if self.selected_user_id is None:
            return None
        return self.directory.get_user(self.selected_user_id)

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        if event.row_key is None or event.row_key.value is None:
            self.selected_user_id = None
            return
        self.selected_user_id = int(event.row_key.value)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        if event.row_key.value is not None:
            self.selected_user_id = int(event.row_key.value)
            self.action_edit_user()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search":
            self.directory.search(event.value)
            self.refresh_users()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "create":
            self.action_create_user()
        elif button_id == "logout":
            self.app.logout()
        elif button_id == "previous":
            self.action_previous_page()
        elif button_id == "next":
            self.action_next_page()

    def handle_change(self, result: bool) -> None:
        if result:
            self.refresh_users()

    def action_create_user(self) -> None:
        if not self.allow_create:
            return
        logging.info("Opening UserFormModal for create")
        self.app.push_screen(UserFormModal(self.directory, "create"), callback=self.handle_change)

    def action_edit_user(self) -> None:
        user = self.selected_user()
        if user is None:
            logging.warning("No user selected for edit")
            return
        logging.info(f"Opening UserFormModal for edit of user id={user.id}")
        self.app.push_screen(UserFormModal(self.directory, "edit", user), callback=self.handle_change)

    def action_delete_user(self) -> None:
        user = self.selected_user()
        if user is None:
            logging.warning("No user selected for deletion")
            return
        logging.info(f"Opening DeleteUserModal for user id={user.id}")
        self.app.push_screen(DeleteUserModal(self.directory, user), callback=self.handle_change)

    def action_next_page(self) -> None:
        if self.loading_page or not self.directory.has_next:
            return
        self.load_page(self.directory.clamp_page(self.directory.current_page + 1))

    def action_previous_page(self) -> None:
        if self.loading_page or not self.directory.has_previous:
            return
        self.load_page(self.directory.clamp_page(self.directory.current_page - 1))

    def action_focus_search(self) -> None:
        self.query_one("#search", Input).focus()
