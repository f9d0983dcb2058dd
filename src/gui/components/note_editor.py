"""
Note Editor Component - Create and edit surface for a single note
"""

from typing import Optional, Tuple
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QLineEdit, QLabel, QPushButton
)
from PySide6.QtCore import Signal, Qt

from src.models.note import NoteIndexError
from src.models.validation import (
    NoteValidation, TITLE_ERROR_MESSAGE, DESCRIPTION_ERROR_MESSAGE
)
from src.tools.notes_service import NotesService
from src.utils.colors import NoteStackColors
from src.utils.enums import EditorMode
from src.utils.logger import Logger
from src.utils.state_machine import (
    EDITING_STATES, EditorState, TransitionResult, create_editor_state_machine
)


class NoteEditor(QWidget):
    """Editor widget for creating a note or editing the note at an index.

    Features:
    - Title and description inputs buffered locally until save
    - Inline error labels re-evaluated on every keystroke
    - Save enabled only while the draft passes validation
    - Delete (edit mode only) and Cancel, neither of which validates
    - Signals for note_changed, finished and aborted
    """

    # Signals
    note_changed = Signal()  # Emitted when a field changes
    finished = Signal()  # Emitted after save, delete or cancel
    aborted = Signal(str)  # Emitted when the target index is no longer valid

    def __init__(self, service: NotesService, note_index: Optional[int] = None):
        """Initialize the note editor.

        Args:
            service: Service wrapping the application's note store
            note_index: Index of the note to edit, None to create a new note

        Raises:
            NoteIndexError: note_index does not address a note
        """
        super().__init__()
        self.logger = Logger()
        self._service = service
        self._note_index = note_index
        self.mode = EditorMode.CREATE if note_index is None else EditorMode.EDIT
        note = service.get_note(note_index) if note_index is not None else None

        self._state = create_editor_state_machine(self.mode == EditorMode.EDIT)
        self._validation: Optional[NoteValidation] = None
        self._setup_ui()
        self._load_fields(
            note.title if note else "",
            note.description if note else ""
        )
        self._connect_signals()

    def _setup_ui(self):
        """Setup the editor UI."""
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(16, 16, 16, 16)
        self.main_layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        # Title input
        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Enter note title")
        self.main_layout.addWidget(self.title_input)

        self.title_error_label = QLabel(TITLE_ERROR_MESSAGE)
        self.title_error_label.setStyleSheet(
            NoteStackColors.get_stylesheet("error_text")
        )
        self.title_error_label.hide()
        self.main_layout.addWidget(self.title_error_label)
        self.main_layout.addSpacing(8)

        # Description input
        self.description_input = QLineEdit()
        self.description_input.setPlaceholderText("Enter note description")
        self.main_layout.addWidget(self.description_input)

        self.description_error_label = QLabel(DESCRIPTION_ERROR_MESSAGE)
        self.description_error_label.setStyleSheet(
            NoteStackColors.get_stylesheet("error_text")
        )
        self.description_error_label.hide()
        self.main_layout.addWidget(self.description_error_label)
        self.main_layout.addSpacing(16)

        # Actions
        save_text = "Create Note" if self.mode == EditorMode.CREATE else "Save Changes"
        self.save_button = QPushButton(save_text)
        self.save_button.setStyleSheet(NoteStackColors.get_stylesheet("button"))
        self.main_layout.addWidget(self.save_button)

        self.delete_button: Optional[QPushButton] = None
        if self.mode == EditorMode.EDIT:
            self.main_layout.addSpacing(16)
            self.delete_button = QPushButton("Delete Note")
            self.delete_button.setStyleSheet(
                NoteStackColors.get_stylesheet("danger_button")
            )
            self.main_layout.addWidget(self.delete_button)

        self.main_layout.addSpacing(16)
        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.setStyleSheet(NoteStackColors.get_stylesheet("button"))
        self.main_layout.addWidget(self.cancel_button)

    def _connect_signals(self):
        """Connect internal signals."""
        self.title_input.textChanged.connect(self._on_fields_changed)
        self.description_input.textChanged.connect(self._on_fields_changed)
        self.save_button.clicked.connect(self.save)
        self.cancel_button.clicked.connect(self.cancel)
        if self.delete_button is not None:
            self.delete_button.clicked.connect(self.delete)

    def _load_fields(self, title: str, description: str):
        """Prefill the inputs without leaving the EMPTY/PREFILLED state."""
        self.title_input.blockSignals(True)
        self.description_input.blockSignals(True)
        try:
            self.title_input.setText(title)
            self.description_input.setText(description)
        finally:
            self.description_input.blockSignals(False)
            self.title_input.blockSignals(False)
        self._refresh_validation()

    def _refresh_validation(self) -> NoteValidation:
        """Re-run validation and update error labels and the save action."""
        title, description = self.get_draft()
        validation = self._service.validate(title, description)
        self._validation = validation

        self.title_error_label.setVisible(validation.title_error)
        self.description_error_label.setVisible(validation.description_error)
        self.title_input.setStyleSheet(NoteStackColors.get_stylesheet(
            "input_field_error" if validation.title_error else "input_field"
        ))
        self.description_input.setStyleSheet(NoteStackColors.get_stylesheet(
            "input_field_error" if validation.description_error else "input_field"
        ))
        # An empty field disables save without showing an error
        self.save_button.setEnabled(validation.can_save)
        return validation

    def _on_fields_changed(self):
        validation = self._refresh_validation()
        target = EditorState.VALID if validation.can_save else EditorState.INVALID
        self._state.transition_to(target, self._context())
        self.note_changed.emit()

    def _context(self) -> dict:
        return {"edit_mode": self.mode == EditorMode.EDIT, "index": self._note_index}

    def get_draft(self) -> Tuple[str, str]:
        """Current (title, description) as typed."""
        return self.title_input.text(), self.description_input.text()

    def get_note_index(self) -> Optional[int]:
        return self._note_index

    @property
    def state(self) -> EditorState:
        return self._state.get_current_state()

    @property
    def validation(self) -> NoteValidation:
        return self._validation

    def save(self) -> bool:
        """Commit the draft to the store.

        Returns False without touching the store when the draft is invalid.
        """
        if not self._state.is_in_state(*EDITING_STATES):
            return False
        validation = self._refresh_validation()
        target = EditorState.VALID if validation.can_save else EditorState.INVALID
        self._state.transition_to(target, self._context())
        if self._state.transition_to(EditorState.SAVED, self._context()) != TransitionResult.SUCCESS:
            return False

        title, description = self.get_draft()
        try:
            self._service.save_note(title, description, self._note_index)
        except NoteIndexError as e:
            self._abort(e)
            return False
        self.finished.emit()
        return True

    def delete(self) -> bool:
        """Remove the edited note from the store without confirmation."""
        if self._state.transition_to(EditorState.DELETED, self._context()) != TransitionResult.SUCCESS:
            return False
        try:
            self._service.delete_note(self._note_index)
        except NoteIndexError as e:
            self._abort(e)
            return False
        self.finished.emit()
        return True

    def cancel(self) -> bool:
        """Discard the draft without touching the store."""
        if self._state.transition_to(EditorState.CANCELLED, self._context()) != TransitionResult.SUCCESS:
            return False
        self.logger.debug("Note edit cancelled, draft discarded")
        self.finished.emit()
        return True

    def _abort(self, error: NoteIndexError):
        self.logger.error(f"Editor acted on a stale note index: {error}")
        self.aborted.emit(str(error))

    def set_focus(self):
        """Set focus to the title input."""
        self.title_input.setFocus()
