# zfinder/core/observable.py

from typing import Any, Callable, List


class ObservableCell:
    """
    A mutable value that tells its listeners when it changes.

    Listeners are called with the new value, in the order they subscribed,
    after the write has happened. Writing a value equal to the current one
    is a no-op and notifies nobody.
    """

    def __init__(self, value: Any):
        self._value = value
        self._listeners: List[Callable[[Any], None]] = []

    @property
    def value(self) -> Any:
        return self._value

    def set(self, value: Any):
        if value == self._value:
            return
        self._value = value
        for listener in list(self._listeners):
            listener(value)

    def subscribe(self, listener: Callable[[Any], None]) -> Callable[[], None]:
        """
        Registers a listener and returns a function that unregisters it.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


class Binding:
    """
    A get/set pair that a view can read from and write through.

    Views receive a Binding instead of the object that owns the value, so the
    owner stays the only place the value actually lives.
    """

    def __init__(self, getter: Callable[[], Any], setter: Callable[[Any], None]):
        self._getter = getter
        self._setter = setter

    @property
    def value(self) -> Any:
        return self._getter()

    @value.setter
    def value(self, new_value: Any):
        self._setter(new_value)

    def on_update(self, callback: Callable[[], None]) -> "Binding":
        """
        Returns a new Binding that runs `callback` after every write.

        The callback fires on every write, including writes that leave the
        value unchanged.

        Args:
            callback: A zero-argument function to run after each write.

        Returns:
            A new Binding over the same value.
        """
        def write_then_notify(new_value):
            self._setter(new_value)
            callback()

        return Binding(self._getter, write_then_notify)
