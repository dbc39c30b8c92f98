from enum import Enum
from enum import auto
from typing import NamedTuple

from devcycle.core.command_types import Command
from devcycle.helpers.jobs_result import OperationError


class RunStage(Enum):
    PENDING = auto()
    RUNNING = auto()
    SUCCEEDED = auto()
    FAILED = auto()


class RunState(NamedTuple):
    stage: RunStage
    step: int | None = None  # 1-indexed
    cause: OperationError | None = None

    def __repr__(self):
        if self.stage == RunStage.RUNNING:
            return f'Running(step {self.step})'
        if self.stage == RunStage.FAILED:
            return f'Failed(step {self.step}, exit code {self.cause.exit_code})'
        return self.stage.name.capitalize()


PENDING = RunState(RunStage.PENDING)
SUCCEEDED = RunState(RunStage.SUCCEEDED)


def running(step: int) -> RunState:
    return RunState(RunStage.RUNNING, step)


def failed(step: int, cause: OperationError) -> RunState:
    return RunState(RunStage.FAILED, step, cause)


class RunReport(NamedTuple):
    operation: str
    state: RunState
    exit_code: int
    executed: tuple[Command, ...]

    @property
    def succeeded(self) -> bool:
        return self.state.stage == RunStage.SUCCEEDED
