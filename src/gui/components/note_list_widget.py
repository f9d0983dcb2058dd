"""
Note List Widget Component - Displays the notes of a NoteStore
"""

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QListWidget, QListWidgetItem,
    QLabel, QPushButton, QHBoxLayout
)
from PySide6.QtCore import Signal, Qt, QSize
from PySide6.QtGui import QFont

from ...utils.colors import NoteStackColors
from ...utils.enums import StoreEvent
from ...utils.logger import Logger
from ...models.note import Note, NoteStore


class NoteListItem(QWidget):
    """Row widget showing a note's title above its description."""

    def __init__(self, note: Note):
        super().__init__()
        self.note = note
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 8, 16, 8)
        layout.setSpacing(4)

        self.title_label = QLabel(self.note.title)
        title_font = QFont()
        title_font.setBold(True)
        title_font.setPointSize(13)
        self.title_label.setFont(title_font)
        self.title_label.setStyleSheet(f"color: {NoteStackColors.PRIMARY_TEXT};")
        layout.addWidget(self.title_label)

        self.description_label = QLabel(self.note.description)
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(
            f"color: {NoteStackColors.SECONDARY_TEXT}; font-size: 12px;"
        )
        layout.addWidget(self.description_label)


class NoteListWidget(QWidget):
    """List surface: one row per note in the store, in store order.

    Rows carry their store index. The widget re-renders whenever the store
    reports a mutation, so indices are always those of a live enumeration.
    """

    # Signals
    note_activated = Signal(int)  # index of the clicked note
    create_requested = Signal()

    def __init__(self, store: NoteStore):
        super().__init__()
        self.logger = Logger()
        self._store = store
        self._setup_ui()
        self._store.subscribe(self._on_store_changed)
        self.refresh()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(9)

        header = QHBoxLayout()
        self.add_button = QPushButton("+")
        self.add_button.setToolTip("Create New Note")
        self.add_button.setFixedSize(QSize(56, 56))
        self.add_button.setStyleSheet(NoteStackColors.get_stylesheet("button"))
        self.add_button.clicked.connect(self._on_add_clicked)
        header.addWidget(self.add_button)
        header.addStretch()
        layout.addLayout(header)

        self.list_widget = QListWidget()
        self.list_widget.setSpacing(4)
        self.list_widget.setStyleSheet(f"""
            QListWidget {{
                background-color: {NoteStackColors.MAIN_BACKGROUND};
                border: none;
                outline: none;
            }}
            QListWidget::item {{
                background-color: {NoteStackColors.PANEL_BACKGROUND};
                border: 1px solid transparent;
                border-radius: 5px;
            }}
            QListWidget::item:hover {{
                border-color: {NoteStackColors.SOFT_ORANGE};
            }}
        """)
        self.list_widget.itemClicked.connect(self._on_item_clicked)
        layout.addWidget(self.list_widget)

        self.empty_text = QLabel("No notes yet")
        self.empty_text.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_text.setStyleSheet(f"color: {NoteStackColors.SECONDARY_TEXT};")
        layout.addWidget(self.empty_text)

    def refresh(self):
        """Rebuild all rows from the store."""
        self.list_widget.clear()
        for index in range(self._store.length()):
            note = self._store.get(index)
            item_widget = NoteListItem(note)

            list_item = QListWidgetItem(self.list_widget)
            list_item.setToolTip(note.title)
            list_item.setData(Qt.ItemDataRole.UserRole, index)
            list_item.setSizeHint(item_widget.sizeHint())
            self.list_widget.addItem(list_item)
            self.list_widget.setItemWidget(list_item, item_widget)

        has_notes = self._store.length() > 0
        self.list_widget.setVisible(has_notes)
        self.empty_text.setVisible(not has_notes)

    def count(self) -> int:
        return self.list_widget.count()

    def row_widget(self, row: int) -> NoteListItem:
        return self.list_widget.itemWidget(self.list_widget.item(row))

    def activate_row(self, row: int):
        """Activate a row as if it had been clicked."""
        item = self.list_widget.item(row)
        if item is not None:
            self._on_item_clicked(item)

    def _on_item_clicked(self, item: QListWidgetItem):
        index = item.data(Qt.ItemDataRole.UserRole)
        self.logger.debug(f"Note row activated: {index}")
        self.note_activated.emit(index)

    def _on_add_clicked(self):
        self.create_requested.emit()

    def _on_store_changed(self, event: StoreEvent, index: int):
        self.refresh()

    def detach(self):
        """Stop following store changes."""
        self._store.unsubscribe(self._on_store_changed)
