"""
NoteStack Test Suite
====================

Core model, validation, service and state machine tests run headless.
GUI tests create a QApplication; run them with QT_QPA_PLATFORM=offscreen
on machines without a display.

Run tests with:
    pytest tests/
"""
