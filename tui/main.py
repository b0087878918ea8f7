"""
Registration form TUI - input fields, per-field errors and the session's record log.
"""

import sys

from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Button, Checkbox, DataTable, Footer, Header, Input, Label, Static

from registration.core import config
from registration.core.models import FormValues
from registration.core.schema import Accepted, FieldName, Outcome
from registration.core.session import IntakeSession
from util.logging import logger
from .surface import LOG_COLUMNS, TextualSurface, error_id, field_ids


class RegistrationScreen(Screen):
    """Registration form with the accepted-record log underneath."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.session = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Container(
            Static("", id="timestamp", classes="hint"),
            Label("Full name", classes="label"),
            Input(id=FieldName.FULL_NAME.value, placeholder="First Last"),
            Static("", id=error_id(FieldName.FULL_NAME), classes="error"),
            Label("Email", classes="label"),
            Input(id=FieldName.EMAIL.value, placeholder="name@example.com"),
            Static("", id=error_id(FieldName.EMAIL), classes="error"),
            Label("Phone", classes="label"),
            Input(id=FieldName.PHONE.value, placeholder="+358401234567 or 0401234567"),
            Static("", id=error_id(FieldName.PHONE), classes="error"),
            Label("Birth date", classes="label"),
            Input(id=FieldName.BIRTH_DATE.value, placeholder="YYYY-MM-DD"),
            Static("", id=error_id(FieldName.BIRTH_DATE), classes="error"),
            Checkbox("I accept the terms", id=FieldName.TERMS.value),
            Static("", id=error_id(FieldName.TERMS), classes="error"),
            Horizontal(
                Button("Register", id="submit-button", variant="primary"),
                id="actions",
            ),
            id="form-container",
        )
        yield DataTable(id="records", zebra_stripes=True)
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#records", DataTable)
        table.cursor_type = "row"
        table.add_columns(*LOG_COLUMNS)
        self.session = IntakeSession(TextualSurface(self))
        self.query_one(f"#{FieldName.FULL_NAME.value}", Input).focus()

    def read_values(self) -> FormValues:
        """Snapshot the widgets as raw form values."""
        return FormValues(
            full_name=self.query_one(f"#{FieldName.FULL_NAME.value}", Input).value,
            email=self.query_one(f"#{FieldName.EMAIL.value}", Input).value,
            phone=self.query_one(f"#{FieldName.PHONE.value}", Input).value,
            birth_date=self.query_one(f"#{FieldName.BIRTH_DATE.value}", Input).value,
            terms=self.query_one(f"#{FieldName.TERMS.value}", Checkbox).value,
        )

    def submit(self) -> Outcome:
        outcome = self.session.submit(self.read_values())
        if isinstance(outcome, Accepted):
            self.notify(f"Registered {outcome.record.full_name}", title="Registration", severity="information")
        else:
            count = len(outcome.errors.invalid_fields())
            self.notify(f"{count} field(s) need attention", title="Registration", severity="warning")
        return outcome

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "submit-button":
            self.submit()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id in field_ids():
            self.submit()

    def on_input_changed(self, event: Input.Changed) -> None:
        if self.session is not None and event.input.id in field_ids():
            self.session.field_changed(event.input.id)

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        if self.session is not None and event.checkbox.id == FieldName.TERMS.value:
            self.session.field_changed(FieldName.TERMS)


class RegistrationApp(App):
    """Registration intake TUI application."""

    CSS = """
    .label {
        margin-top: 1;
    }

    .error {
        color: red;
        text-style: italic;
    }

    .hint {
        color: gray;
        text-style: italic;
    }

    #form-container {
        height: auto;
        padding: 1;
        border: solid cyan;
    }

    #actions {
        height: auto;
        margin-top: 1;
    }

    #records {
        height: 1fr;
        border: solid white;
    }
    """

    TITLE = config.FORM_TITLE

    BINDINGS = [("ctrl+q", "quit", "Quit")]

    SCREENS = {
        "registration": RegistrationScreen,
    }

    def on_mount(self) -> None:
        logger.info("Registration form started")
        self.push_screen("registration")


def main():
    """Registration form entry point."""
    issues = config.validate_form_config()
    if issues:
        for issue in issues:
            print(f"❌ Configuration error: {issue}")
        sys.exit(1)

    try:
        RegistrationApp().run()
    except KeyboardInterrupt:
        print("\nℹ️  Registration form interrupted by user")
        logger.info("Registration form exited via keyboard interrupt")
    except Exception as e:
        error_msg = f"Registration form failed: {e}"
        print(f"❌ {error_msg}")
        logger.error(error_msg)
        sys.exit(1)


if __name__ == "__main__":
    main()
