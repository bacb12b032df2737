# zfinder/gui/dispatcher.py

from PySide6.QtCore import QObject, Qt, Signal, Slot


class QtDispatcher(QObject):
    """
    Runs posted callbacks on the thread that owns this object (the GUI thread).

    `post` emits a signal over a queued connection, so the callback is
    delivered through the Qt event loop: never re-entrantly, always in the
    order posted, and after events that were already queued.
    """
    _posted = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._posted.connect(self._run, Qt.QueuedConnection)

    def post(self, callback):
        self._posted.emit(callback)

    @Slot(object)
    def _run(self, callback):
        callback()
