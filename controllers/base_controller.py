# -*- coding: utf-8 -*-
"""
Base Controller
===============
Base class for controllers sitting between the UI and the services.

A controller runs at most one long operation at a time (a submission, a
load). The operation lifecycle drives the common signals and the
loading flag so views can show progress without knowing the operation.
"""

from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)


class BaseController(QObject):
    """
    Base controller class.

    Provides:
    - Operation lifecycle signals
    - Loading state
    - Last error bookkeeping
    """

    # Common signals
    operation_started = pyqtSignal(str)  # operation name
    operation_completed = pyqtSignal(str, bool)  # operation name, success
    operation_error = pyqtSignal(str, str)  # operation name, error message
    loading_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._is_loading = False
        self._last_error = ""
        self._current_operation: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        """Check if controller is performing an operation."""
        return self._is_loading

    @property
    def last_error(self) -> str:
        return self._last_error

    @property
    def current_operation(self) -> Optional[str]:
        return self._current_operation

    def _set_loading(self, loading: bool):
        if self._is_loading == loading:
            return
        self._is_loading = loading
        self.loading_changed.emit(loading)

    def _set_error(self, error: str):
        self._last_error = error
        if error:
            logger.error(f"{self.__class__.__name__}: {error}")

    def _begin_operation(self, operation: str, **details):
        """Mark an operation as running; clears the previous error."""
        logger.info(f"{self.__class__.__name__}.{operation} started: {details}")
        self._current_operation = operation
        self._set_error("")
        self.operation_started.emit(operation)
        self._set_loading(True)

    def _finish_operation(self, operation: str, error: str = ""):
        """
        Close the running operation.

        A non-empty error becomes last_error and is reported through
        operation_error before operation_completed(operation, False).
        """
        if error:
            self._set_error(error)
            self.operation_error.emit(operation, error)
        self._current_operation = None
        self.operation_completed.emit(operation, not error)
        self._set_loading(False)

    def _abandon_operation(self):
        """Forget the running operation without emitting anything."""
        if self._current_operation is not None:
            logger.debug(f"{self.__class__.__name__}.{self._current_operation} abandoned")
        self._current_operation = None
        self._is_loading = False
