from enum import Enum
from enum import auto


class JobResult(Enum):
    GOOD = auto()
    BAD = auto()


class OperationError:
    def __init__(self, log: str, exit_code: int = 1, command: str = None, step: int = None):
        self.log = log
        self.exit_code = exit_code
        self.command = command
        self.step = step

    def at_step(self, step: int) -> 'OperationError':
        return OperationError(self.log, self.exit_code, self.command, step)

    def __eq__(self, other):
        return other == JobResult.BAD

    def __repr__(self):
        return f'Operation finished unsuccessful:\n{self.log}'
