from copy import deepcopy
from typing import Callable
from typing import Generic
from typing import TypeVar

from devcycle.errors import RunStateError

T = TypeVar('T')


class StateKeeper(Generic[T]):
    def __init__(self, state: T, is_terminal: Callable[[T], bool] = lambda state: False):
        self._state: T = deepcopy(state)
        self._is_terminal = is_terminal

    @property
    def state(self) -> T:
        return self._state

    def in_state(self, new_state: T):
        return self._state == new_state

    def is_terminal(self) -> bool:
        return self._is_terminal(self._state)

    def update_state(self, new_state: T):
        if self.is_terminal():
            raise RunStateError(f"Can't leave terminal state {self._state!r}")
        self._state = deepcopy(new_state)
