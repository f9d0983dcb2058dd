"""
Unit tests for Notes GUI components.
Tests NoteListWidget, NoteDetailView, NoteEditor and NotesPage navigation
against a real in-memory NoteStore.
"""

import os

import pytest
from unittest.mock import Mock

from PySide6.QtWidgets import QApplication

from src.models.note import Note, NoteStore, NoteIndexError
from src.tools.notes_service import NotesService
from src.gui.components.note_detail_view import NoteDetailView
from src.gui.components.note_editor import NoteEditor
from src.gui.components.note_list_widget import NoteListWidget
from src.gui.main_window import MainWindow
from src.gui.pages.notes_page import NotesPage, parse_route
from src.utils.enums import EditorMode, Screen
from src.utils.state_machine import EditorState


@pytest.fixture(scope="session")
def app():
    """Create QApplication for testing."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def store():
    store = NoteStore()
    store.append(Note("Groceries", "Milk, eggs"))
    store.append(Note("Errands", "Post office"))
    return store


@pytest.fixture
def service(store):
    return NotesService(store)


class TestNoteListWidget:
    """Test suite for NoteListWidget component."""

    @pytest.fixture
    def note_list(self, app, store):
        return NoteListWidget(store)

    def test_initial_rows(self, note_list):
        assert note_list.count() == 2
        assert note_list.row_widget(0).title_label.text() == "Groceries"
        assert note_list.row_widget(1).title_label.text() == "Errands"

    def test_empty_store(self, app):
        note_list = NoteListWidget(NoteStore())

        assert note_list.count() == 0
        assert note_list.empty_text.isHidden() is False
        assert note_list.list_widget.isHidden() is True

    def test_refreshes_on_store_change(self, note_list, store):
        store.append(Note("Tea", "Green"))
        assert note_list.count() == 3
        assert note_list.row_widget(2).title_label.text() == "Tea"

        store.remove_at(0)
        assert note_list.count() == 2
        assert note_list.row_widget(0).title_label.text() == "Errands"

    def test_row_activation_emits_index(self, note_list):
        signal_spy = Mock()
        note_list.note_activated.connect(signal_spy)

        note_list.activate_row(1)

        signal_spy.assert_called_once_with(1)

    def test_add_button_requests_create(self, note_list):
        signal_spy = Mock()
        note_list.create_requested.connect(signal_spy)

        note_list.add_button.click()

        signal_spy.assert_called_once()

    def test_detach(self, note_list, store):
        note_list.detach()
        store.append(Note("Tea", "Green"))

        assert note_list.count() == 2


class TestNoteDetailView:
    """Test suite for NoteDetailView component."""

    @pytest.fixture
    def view(self, app):
        return NoteDetailView(Note("Groceries", "Milk, eggs"), 3)

    def test_labels(self, view):
        assert view.title_label.text() == "Title: Groceries"
        assert view.description_label.text() == "Description: Milk, eggs"

    def test_edit_emits_index(self, view):
        signal_spy = Mock()
        view.edit_requested.connect(signal_spy)

        view.edit_button.click()

        signal_spy.assert_called_once_with(3)

    def test_back(self, view):
        signal_spy = Mock()
        view.back_requested.connect(signal_spy)

        view.back_button.click()

        signal_spy.assert_called_once()


class TestNoteEditor:
    """Test suite for NoteEditor component."""

    @pytest.fixture
    def create_editor(self, app, service):
        return NoteEditor(service)

    @pytest.fixture
    def edit_editor(self, app, service):
        return NoteEditor(service, 1)

    def test_create_mode_initial_state(self, create_editor):
        assert create_editor.mode == EditorMode.CREATE
        assert create_editor.state == EditorState.EMPTY
        assert create_editor.get_draft() == ("", "")
        assert create_editor.save_button.text() == "Create Note"
        assert create_editor.save_button.isEnabled() is False
        assert create_editor.delete_button is None

    def test_edit_mode_prefilled(self, edit_editor):
        assert edit_editor.mode == EditorMode.EDIT
        assert edit_editor.state == EditorState.PREFILLED
        assert edit_editor.get_draft() == ("Errands", "Post office")
        assert edit_editor.save_button.text() == "Save Changes"
        assert edit_editor.save_button.isEnabled() is True
        assert edit_editor.delete_button is not None

    def test_edit_mode_stale_index(self, app, service):
        with pytest.raises(NoteIndexError):
            NoteEditor(service, 5)

    def test_short_title_shows_error(self, create_editor):
        create_editor.title_input.setText("Hi")

        assert create_editor.title_error_label.isHidden() is False
        assert create_editor.save_button.isEnabled() is False
        assert create_editor.state == EditorState.INVALID

    def test_empty_title_hides_error_but_blocks_save(self, create_editor):
        """No error text is shown for an empty title, yet save stays disabled."""
        create_editor.title_input.setText("Hi")
        create_editor.description_input.setText("Some description")
        create_editor.title_input.setText("")

        assert create_editor.title_error_label.isHidden() is True
        assert create_editor.validation.title_error is False
        assert create_editor.save_button.isEnabled() is False
        assert create_editor.state == EditorState.INVALID

    def test_long_description_shows_error(self, create_editor):
        create_editor.title_input.setText("Groceries")
        create_editor.description_input.setText("d" * 121)

        assert create_editor.description_error_label.isHidden() is False
        assert create_editor.save_button.isEnabled() is False

        create_editor.description_input.setText("d" * 120)

        assert create_editor.description_error_label.isHidden() is True
        assert create_editor.save_button.isEnabled() is True
        assert create_editor.state == EditorState.VALID

    def test_note_changed_signal(self, create_editor):
        signal_spy = Mock()
        create_editor.note_changed.connect(signal_spy)

        create_editor.title_input.setText("New Title")

        assert signal_spy.call_count >= 1

    def test_create_appends(self, create_editor, store):
        finished = Mock()
        create_editor.finished.connect(finished)
        create_editor.title_input.setText("Tea")
        create_editor.description_input.setText("Green")

        create_editor.save_button.click()

        assert store.length() == 3
        assert store.get(2) == Note("Tea", "Green")
        assert create_editor.state == EditorState.SAVED
        finished.assert_called_once()

    def test_save_invalid_draft_does_nothing(self, create_editor, store):
        finished = Mock()
        create_editor.finished.connect(finished)
        create_editor.title_input.setText("Hi")
        create_editor.description_input.setText("Green")

        assert create_editor.save() is False

        assert store.length() == 2
        assert create_editor.state == EditorState.INVALID
        finished.assert_not_called()

    def test_edit_replaces(self, edit_editor, store):
        edit_editor.title_input.setText("Errands today")

        assert edit_editor.save() is True

        assert store.get(1) == Note("Errands today", "Post office")
        assert store.get(0) == Note("Groceries", "Milk, eggs")
        assert store.length() == 2

    def test_prefilled_save_without_edits(self, edit_editor, store):
        assert edit_editor.save() is True
        assert store.get(1) == Note("Errands", "Post office")

    def test_delete_removes(self, edit_editor, store):
        finished = Mock()
        edit_editor.finished.connect(finished)

        edit_editor.delete_button.click()

        assert store.notes() == [Note("Groceries", "Milk, eggs")]
        assert edit_editor.state == EditorState.DELETED
        finished.assert_called_once()

    def test_delete_from_invalid_state(self, edit_editor, store):
        edit_editor.title_input.setText("X")

        assert edit_editor.delete() is True
        assert store.length() == 1

    def test_delete_not_available_when_creating(self, create_editor, store):
        assert create_editor.delete() is False
        assert store.length() == 2

    def test_cancel_discards_draft(self, edit_editor, store):
        finished = Mock()
        edit_editor.finished.connect(finished)
        edit_editor.title_input.setText("Something else")

        edit_editor.cancel_button.click()

        assert store.get(1) == Note("Errands", "Post office")
        assert edit_editor.state == EditorState.CANCELLED
        finished.assert_called_once()

    def test_stale_index_aborts(self, edit_editor, store):
        aborted = Mock()
        finished = Mock()
        edit_editor.aborted.connect(aborted)
        edit_editor.finished.connect(finished)
        store.remove_at(1)

        assert edit_editor.save() is False

        aborted.assert_called_once()
        finished.assert_not_called()
        assert store.notes() == [Note("Groceries", "Milk, eggs")]


class TestParseRoute:
    """Test suite for route parsing."""

    @pytest.mark.parametrize("route,expected", [
        ("main", (Screen.MAIN, None)),
        ("editNote", (Screen.EDIT_NOTE, None)),
        ("editNote/2", (Screen.EDIT_NOTE, 2)),
        ("noteDetail/0", (Screen.NOTE_DETAIL, 0)),
    ])
    def test_valid(self, route, expected):
        assert parse_route(route) == expected

    @pytest.mark.parametrize("route", [
        "noteDetail", "noteDetail/abc", "noteDetail/-1", "main/1", "settings"
    ])
    def test_invalid(self, route):
        with pytest.raises(ValueError):
            parse_route(route)


class TestNotesPage:
    """Test suite for NotesPage navigation."""

    @pytest.fixture
    def notes_page(self, app, store):
        return NotesPage(store)

    def test_initial_state(self, notes_page):
        assert notes_page.current_route() == "main"
        assert notes_page.current_screen() is notes_page.note_list
        assert notes_page.count_label.text() == "2 notes"

    def test_row_opens_detail(self, notes_page):
        notes_page.note_list.activate_row(1)

        assert notes_page.current_route() == "noteDetail/1"
        view = notes_page.current_screen()
        assert isinstance(view, NoteDetailView)
        assert view.title_label.text() == "Title: Errands"

    def test_invalid_detail_index_shows_nothing(self, notes_page):
        assert notes_page.navigate("noteDetail/7") is False
        assert notes_page.navigate("noteDetail/abc") is False
        assert notes_page.back_stack() == ["main"]

    def test_main_is_never_popped(self, notes_page):
        assert notes_page.pop_back_stack() is False
        assert notes_page.current_route() == "main"

    def test_create_flow(self, notes_page, store):
        notes_page.note_list.add_button.click()
        editor = notes_page.current_screen()
        assert isinstance(editor, NoteEditor)
        assert notes_page.current_route() == "editNote"

        editor.title_input.setText("Groceries")
        editor.description_input.setText("Milk, eggs")
        editor.save_button.click()

        assert notes_page.back_stack() == ["main"]
        assert store.get(store.length() - 1) == Note("Groceries", "Milk, eggs")
        assert notes_page.note_list.count() == 3
        assert notes_page.count_label.text() == "3 notes"

    def test_edit_flow_refreshes_detail(self, notes_page, store):
        notes_page.navigate("noteDetail/0")
        notes_page.current_screen().edit_button.click()
        assert notes_page.current_route() == "editNote/0"

        editor = notes_page.current_screen()
        editor.description_input.setText("Milk, eggs, bread")
        editor.save_button.click()

        assert notes_page.back_stack() == ["main", "noteDetail/0"]
        view = notes_page.current_screen()
        assert view.description_label.text() == "Description: Milk, eggs, bread"

    def test_cancel_returns_to_detail(self, notes_page, store):
        notes_page.navigate("noteDetail/0")
        notes_page.navigate("editNote/0")
        notes_page.current_screen().title_input.setText("Changed")

        notes_page.current_screen().cancel_button.click()

        assert notes_page.back_stack() == ["main", "noteDetail/0"]
        assert store.get(0) == Note("Groceries", "Milk, eggs")

    def test_delete_flow_skips_stale_detail(self, notes_page, store):
        """After deleting, the detail screen of the removed note is not revisited."""
        notes_page.navigate("noteDetail/0")
        notes_page.navigate("editNote/0")

        notes_page.current_screen().delete_button.click()

        assert notes_page.back_stack() == ["main"]
        assert notes_page.current_screen() is notes_page.note_list
        assert store.notes() == [Note("Errands", "Post office")]
        assert notes_page.count_label.text() == "1 note"

    def test_detail_back_button(self, notes_page):
        notes_page.navigate("noteDetail/1")

        notes_page.current_screen().back_button.click()

        assert notes_page.back_stack() == ["main"]

    def test_aborted_editor_returns_to_main(self, notes_page, store):
        notes_page.navigate("noteDetail/1")
        notes_page.navigate("editNote/1")
        editor = notes_page.current_screen()
        store.remove_at(1)

        editor.save()

        assert notes_page.back_stack() == ["main"]

    def test_route_changed_signal(self, notes_page):
        signal_spy = Mock()
        notes_page.route_changed.connect(signal_spy)

        notes_page.navigate("editNote")
        notes_page.pop_back_stack()

        assert [c.args[0] for c in signal_spy.call_args_list] == ["editNote", "main"]


class TestMainWindow:
    """Test suite for MainWindow."""

    def test_window_title_follows_route(self, app, store):
        window = MainWindow(store)

        assert window.windowTitle() == "Notes - NoteStack"

        window.notes_page.navigate("editNote")
        assert window.windowTitle() == "New Note - NoteStack"

        window.notes_page.pop_back_stack()
        window.notes_page.navigate("editNote/0")
        assert window.windowTitle() == "Edit Note - NoteStack"
