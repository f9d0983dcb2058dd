"""
Notes Page - Hosts the list, detail and editor screens on a navigation stack.
Routes: main, noteDetail/{index}, editNote, editNote/{noteIndex}
"""

from typing import List, Optional, Tuple
from PySide6.QtWidgets import QWidget, QVBoxLayout, QStackedWidget, QLabel
from PySide6.QtCore import Signal

from src.models.note import NoteStore, NoteIndexError
from src.tools.notes_service import NotesService
from src.utils.colors import NoteStackColors
from src.utils.enums import Screen, StoreEvent
from src.utils.logger import Logger
from src.gui.components.note_detail_view import NoteDetailView
from src.gui.components.note_editor import NoteEditor
from src.gui.components.note_list_widget import NoteListWidget


def parse_route(route: str) -> Tuple[Screen, Optional[int]]:
    """Split a route into its screen and optional note index.

    Raises:
        ValueError: unknown screen, malformed index, or a detail route
            without an index
    """
    name, _, argument = route.partition("/")
    screen = Screen(name)
    if not argument:
        if screen == Screen.NOTE_DETAIL:
            raise ValueError(f"Route '{route}' requires a note index")
        return screen, None
    if screen == Screen.MAIN or not argument.isdigit():
        raise ValueError(f"Malformed route '{route}'")
    return screen, int(argument)


class NotesPage(QWidget):
    """Notes page: a stack of named screens over a single NoteStore.

    The store is owned by the application and handed in; the page only
    exposes it to the screen in the foreground.
    """

    route_changed = Signal(str)

    def __init__(self, store: NoteStore):
        super().__init__()
        self.logger = Logger()
        self.store = store
        self.notes_service = NotesService(store)
        self._routes: List[str] = []

        self._build_ui()
        self.store.subscribe(self._on_store_changed)
        self._routes.append(Screen.MAIN.value)
        self._update_note_count()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        self.setStyleSheet(NoteStackColors.get_stylesheet("main_background"))

        self.stack = QStackedWidget()
        self.note_list = NoteListWidget(self.store)
        self.note_list.note_activated.connect(self._on_note_activated)
        self.note_list.create_requested.connect(
            lambda: self.navigate(Screen.EDIT_NOTE.value)
        )
        self.stack.addWidget(self.note_list)
        layout.addWidget(self.stack)

        self.count_label = QLabel("0 notes")
        self.count_label.setStyleSheet(f"color: {NoteStackColors.SECONDARY_TEXT};")
        layout.addWidget(self.count_label)

    # Navigation

    def current_route(self) -> str:
        return self._routes[-1]

    def back_stack(self) -> List[str]:
        return list(self._routes)

    def current_screen(self) -> QWidget:
        return self.stack.currentWidget()

    def navigate(self, route: str) -> bool:
        """Push the screen for route. Returns False if it cannot be shown."""
        try:
            widget = self._create_screen(route)
        except (ValueError, NoteIndexError) as e:
            self.logger.error(f"Navigation to '{route}' failed: {e}")
            return False

        self.logger.debug(f"Navigating to {route}")
        self._routes.append(route)
        self.stack.addWidget(widget)
        self.stack.setCurrentWidget(widget)
        self.route_changed.emit(route)
        return True

    def pop_back_stack(self) -> bool:
        """Return to the previous screen. The main screen is never popped."""
        if len(self._routes) <= 1:
            return False
        self._routes.pop()
        self._remove_screen(self.stack.count() - 1)

        # Screens below may show notes that changed while they were covered
        self._rebuild_top_screen()
        self.stack.setCurrentIndex(self.stack.count() - 1)
        self.route_changed.emit(self.current_route())
        return True

    def reset_to_main(self) -> None:
        while len(self._routes) > 1:
            self._routes.pop()
            self._remove_screen(self.stack.count() - 1)
        self.stack.setCurrentIndex(0)
        self.route_changed.emit(self.current_route())

    def _create_screen(self, route: str) -> QWidget:
        screen, index = parse_route(route)
        if screen == Screen.MAIN:
            raise ValueError("The main screen is already at the bottom of the stack")

        if screen == Screen.NOTE_DETAIL:
            view = NoteDetailView(self.notes_service.get_note(index), index)
            view.edit_requested.connect(
                lambda i: self.navigate(f"{Screen.EDIT_NOTE.value}/{i}")
            )
            view.back_requested.connect(self.pop_back_stack)
            return view

        editor = NoteEditor(self.notes_service, index)
        editor.finished.connect(self.pop_back_stack)
        editor.aborted.connect(self._on_editor_aborted)
        return editor

    def _remove_screen(self, position: int) -> None:
        widget = self.stack.widget(position)
        self.stack.removeWidget(widget)
        widget.deleteLater()

    def _rebuild_top_screen(self) -> None:
        route = self.current_route()
        if route == Screen.MAIN.value:
            return
        position = self.stack.count() - 1
        try:
            widget = self._create_screen(route)
        except NoteIndexError as e:
            self.logger.warning(f"Dropping stale screen '{route}': {e}")
            self._routes.pop()
            self._remove_screen(position)
            self._rebuild_top_screen()
            return
        self._remove_screen(position)
        self.stack.insertWidget(position, widget)

    def _prune_stale_routes(self, removed_index: int) -> None:
        """Drop covered screens bound to indices shifted by a removal."""
        # The foreground screen performed the removal and pops itself
        for position in range(len(self._routes) - 2, 0, -1):
            _, index = parse_route(self._routes[position])
            if index is not None and index >= removed_index:
                self.logger.debug(f"Pruning stale route '{self._routes[position]}'")
                del self._routes[position]
                self._remove_screen(position)

    # Handlers

    def _on_note_activated(self, index: int) -> None:
        self.navigate(f"{Screen.NOTE_DETAIL.value}/{index}")

    def _on_editor_aborted(self, message: str) -> None:
        self.logger.error(f"Returning to main screen: {message}")
        self.reset_to_main()

    def _on_store_changed(self, event: StoreEvent, index: int) -> None:
        if event == StoreEvent.REMOVED:
            self._prune_stale_routes(index)
        self._update_note_count()

    def _update_note_count(self) -> None:
        count = self.store.length()
        self.count_label.setText(f"{count} note{'s' if count != 1 else ''}")
