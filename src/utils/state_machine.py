"""
State Machine Implementation for NoteStack
Manages application and note editor states with validated transitions
"""

from typing import Dict, List, Optional, Callable, Any, Set
from enum import Enum
from dataclasses import dataclass, field
from datetime import datetime
from abc import ABC, abstractmethod

from .logger import Logger

logger = Logger()


class ApplicationState(Enum):
    """Core application states."""
    INITIALIZING = "initializing"
    STARTING = "starting"
    RUNNING = "running"
    SHUTTING_DOWN = "shutting_down"
    SHUTDOWN = "shutdown"
    ERROR = "error"


class EditorState(Enum):
    """States of the note editing surface."""
    EMPTY = "empty"
    PREFILLED = "prefilled"
    VALID = "valid"
    INVALID = "invalid"
    SAVED = "saved"
    CANCELLED = "cancelled"
    DELETED = "deleted"


EDITING_STATES = frozenset({
    EditorState.EMPTY,
    EditorState.PREFILLED,
    EditorState.VALID,
    EditorState.INVALID,
})


class TransitionResult(Enum):
    """Results of state transitions."""
    SUCCESS = "success"
    FAILED = "failed"
    BLOCKED = "blocked"


@dataclass
class StateTransition:
    """Information about a state transition."""
    from_state: Enum
    to_state: Enum
    timestamp: datetime
    result: TransitionResult
    error_message: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


class StateValidator(ABC):
    """Abstract base class for state validators."""

    @abstractmethod
    def can_transition(self,
                       from_state: Enum,
                       to_state: Enum,
                       context: Dict[str, Any]) -> tuple[bool, str]:
        """
        Check if transition is valid.

        Returns:
            (is_valid, error_message)
        """
        pass


class TableStateValidator(StateValidator):
    """Validator driven by a table of allowed target states."""

    def __init__(self, valid_transitions: Dict[Enum, Set[Enum]]):
        self._valid_transitions = valid_transitions

    def can_transition(self,
                       from_state: Enum,
                       to_state: Enum,
                       context: Dict[str, Any]) -> tuple[bool, str]:
        """Check if transition is valid according to the transition table."""
        valid_targets = self._valid_transitions.get(from_state, set())

        if to_state in valid_targets:
            return True, ""
        return False, f"Invalid transition from {from_state.value} to {to_state.value}"


class DefaultStateValidator(TableStateValidator):
    """Application lifecycle transition rules."""

    def __init__(self):
        super().__init__({
            ApplicationState.INITIALIZING: {
                ApplicationState.STARTING,
                ApplicationState.ERROR,
                ApplicationState.SHUTTING_DOWN
            },
            ApplicationState.STARTING: {
                ApplicationState.RUNNING,
                ApplicationState.ERROR,
                ApplicationState.SHUTTING_DOWN
            },
            ApplicationState.RUNNING: {
                ApplicationState.SHUTTING_DOWN,
                ApplicationState.ERROR
            },
            ApplicationState.ERROR: {
                ApplicationState.SHUTTING_DOWN,
                ApplicationState.SHUTDOWN
            },
            ApplicationState.SHUTTING_DOWN: {
                ApplicationState.SHUTDOWN,
                ApplicationState.ERROR
            },
            ApplicationState.SHUTDOWN: set()  # Terminal state
        })


class EditorStateValidator(TableStateValidator):
    """Editor transition rules.

    Field edits move between the editing states. Save is only reachable from
    VALID; cancel from any editing state; delete from any editing state of an
    editor opened on an existing note (context["edit_mode"]).
    """

    def __init__(self):
        editing_targets = {
            EditorState.VALID,
            EditorState.INVALID,
            EditorState.CANCELLED,
            EditorState.DELETED,
        }
        super().__init__({
            EditorState.EMPTY: set(editing_targets),
            EditorState.PREFILLED: set(editing_targets),
            EditorState.VALID: editing_targets | {EditorState.SAVED},
            EditorState.INVALID: set(editing_targets),
            EditorState.SAVED: set(),
            EditorState.CANCELLED: set(),
            EditorState.DELETED: set(),
        })

    def can_transition(self,
                       from_state: Enum,
                       to_state: Enum,
                       context: Dict[str, Any]) -> tuple[bool, str]:
        if to_state == EditorState.DELETED and not context.get("edit_mode"):
            return False, "Only an existing note can be deleted"
        return super().can_transition(from_state, to_state, context)


class StateMachine:
    """
    State machine for application and editor states.

    Features:
    - State validation and transition rules
    - Event callbacks for state changes
    - State history
    """

    def __init__(self,
                 initial_state: Enum = ApplicationState.INITIALIZING,
                 validator: Optional[StateValidator] = None,
                 name: str = "application"):
        self.name = name
        self._initial_state = initial_state
        self._current_state = initial_state
        self._previous_state: Optional[Enum] = None

        self._validator = validator or DefaultStateValidator()
        self._state_history: List[StateTransition] = []

        # Event callbacks
        self._enter_callbacks: Dict[Enum, List[Callable]] = {}
        self._transition_callbacks: List[Callable] = []

        logger.debug(f"{name} state machine initialized in state: {initial_state.value}")

    def get_current_state(self) -> Enum:
        """Get the current state."""
        return self._current_state

    def get_previous_state(self) -> Optional[Enum]:
        """Get the previous state."""
        return self._previous_state

    def transition_to(self,
                      new_state: Enum,
                      context: Optional[Dict[str, Any]] = None,
                      force: bool = False) -> TransitionResult:
        """
        Transition to a new state.

        Args:
            new_state: Target state
            context: Additional context for the transition
            force: Skip validation if True

        Returns:
            Result of the transition
        """
        context = context or {}
        current = self._current_state

        # Skip if already in target state
        if current == new_state:
            return TransitionResult.SUCCESS

        # Validate transition unless forced
        if not force:
            can_transition, error_msg = self._validator.can_transition(
                current, new_state, context
            )
            if not can_transition:
                logger.warning(f"{self.name} transition blocked: {error_msg}")
                self._record_transition(
                    current, new_state, TransitionResult.BLOCKED, error_msg, context
                )
                return TransitionResult.BLOCKED

        self._previous_state = current
        self._current_state = new_state
        self._record_transition(current, new_state, TransitionResult.SUCCESS, None, context)

        self._call_enter_callbacks(new_state, current, context)
        self._call_transition_callbacks(current, new_state, context)

        logger.debug(f"{self.name} state transition: {current.value} -> {new_state.value}")
        return TransitionResult.SUCCESS

    def _record_transition(self,
                           from_state: Enum,
                           to_state: Enum,
                           result: TransitionResult,
                           error_message: Optional[str] = None,
                           context: Optional[Dict[str, Any]] = None):
        """Record a state transition in history."""
        self._state_history.append(StateTransition(
            from_state=from_state,
            to_state=to_state,
            timestamp=datetime.now(),
            result=result,
            error_message=error_message,
            metadata=context.copy() if context else {}
        ))

        # Keep history size manageable
        if len(self._state_history) > 1000:
            self._state_history = self._state_history[-500:]

    def on_enter(self, state: Enum, callback: Callable):
        """Register callback for state entry."""
        self._enter_callbacks.setdefault(state, []).append(callback)

    def on_transition(self, callback: Callable):
        """Register callback for any state transition."""
        self._transition_callbacks.append(callback)

    def _call_enter_callbacks(self,
                              state: Enum,
                              from_state: Enum,
                              context: Dict[str, Any]):
        """Call enter callbacks for a state."""
        for callback in self._enter_callbacks.get(state, []):
            try:
                callback(state, from_state, context)
            except Exception as e:
                logger.error(f"Error in enter callback for {state.value}: {e}")

    def _call_transition_callbacks(self,
                                   from_state: Enum,
                                   to_state: Enum,
                                   context: Dict[str, Any]):
        """Call transition callbacks."""
        for callback in self._transition_callbacks:
            try:
                callback(from_state, to_state, context)
            except Exception as e:
                logger.error(f"Error in transition callback: {e}")

    def get_state_history(self, limit: Optional[int] = None) -> List[StateTransition]:
        """Get state transition history."""
        history = self._state_history.copy()
        if limit:
            history = history[-limit:]
        return history

    def is_in_state(self, *states: Enum) -> bool:
        """Check if current state is one of the specified states."""
        return self._current_state in states

    def reset(self, initial_state: Optional[Enum] = None):
        """Reset the state machine to its initial state."""
        initial_state = initial_state or self._initial_state
        logger.debug(f"Resetting {self.name} state machine")
        self._current_state = initial_state
        self._previous_state = None
        self._state_history.clear()


def create_editor_state_machine(edit_mode: bool) -> StateMachine:
    """Editor state machine starting in PREFILLED (edit) or EMPTY (create)."""
    initial = EditorState.PREFILLED if edit_mode else EditorState.EMPTY
    return StateMachine(initial, EditorStateValidator(), name="editor")


# Global state machine instance
_state_machine: Optional[StateMachine] = None


def get_state_machine() -> StateMachine:
    """Get the global application state machine instance."""
    global _state_machine

    if _state_machine is None:
        _state_machine = StateMachine()

    return _state_machine


def transition_to_state(state: ApplicationState,
                        context: Optional[Dict[str, Any]] = None,
                        force: bool = False) -> TransitionResult:
    """Convenience function to transition the application state."""
    return get_state_machine().transition_to(state, context, force)
