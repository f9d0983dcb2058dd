"""
NoteStack - Main Application Entry Point
Minimal in-memory note-taking application
"""

import sys
from pathlib import Path

# Add src directory to Python path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from PySide6.QtWidgets import QApplication

from src.utils import ConfigLoader, Logger
from src.utils.state_machine import get_state_machine, ApplicationState, transition_to_state
from src.models.note import NoteStore
from src.gui import MainWindow


class NoteStackApp:
    """Main application class.

    Owns the single NoteStore for the lifetime of the process and hands it to
    the main window. Nothing is persisted: every note is lost on exit.
    """

    def __init__(self):
        self.app = None
        self.main_window = None
        self.config = ConfigLoader()
        self.logger = Logger()
        self.logger.set_level(
            "DEBUG" if self.config.get("app.debug") else self.config.get("logging.level", "INFO")
        )
        self.store = NoteStore()
        self.state_machine = get_state_machine()

        # Set up state machine callbacks
        self._setup_state_callbacks()

    def _setup_state_callbacks(self):
        """Set up state machine callbacks for logging."""
        def log_state_entry(state, from_state, context):
            self.logger.info(f"Entered state: {state.value} (from {from_state.value})")

        for state in ApplicationState:
            self.state_machine.on_enter(state, log_state_entry)

    def initialize_app(self):
        """Initialize the Qt application"""
        transition_to_state(ApplicationState.STARTING)

        self.app = QApplication(sys.argv)
        self.app.setApplicationName(self.config.get("app.name", "NoteStack"))
        self.app.setApplicationVersion(self.config.get("app.version", "1.0.0"))

    def create_main_window(self):
        """Create and show the main window"""
        try:
            self.main_window = MainWindow(self.store, self.config)
            self.main_window.show()
        except Exception as e:
            self.logger.error(f"Failed to create main window: {e}")
            transition_to_state(ApplicationState.ERROR, {"error": str(e)})
            return False
        return True

    def run(self):
        """Run the application"""
        self.logger.info("Starting NoteStack...")

        self.initialize_app()

        if not self.create_main_window():
            return 1

        transition_to_state(ApplicationState.RUNNING)

        self.logger.info("Application started successfully")
        return self.app.exec()

    def cleanup(self):
        """Release the window and the in-memory notes"""
        transition_to_state(ApplicationState.SHUTTING_DOWN)
        self.logger.info("Shutting down NoteStack...")

        if self.main_window is not None:
            self.main_window.close()
            self.main_window = None
        self.logger.info(f"Discarding {self.store.length()} note(s)")
        self.store = None

        transition_to_state(ApplicationState.SHUTDOWN)
        self.logger.info("Application shutdown complete")


def main():
    """Main entry point"""
    app = NoteStackApp()

    try:
        exit_code = app.run()
    except KeyboardInterrupt:
        print("\nApplication interrupted by user")
        exit_code = 0
    except Exception as e:
        print(f"Unexpected error: {e}")
        app.logger.critical(f"Unhandled error: {e}")
        exit_code = 1
    finally:
        app.cleanup()

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
