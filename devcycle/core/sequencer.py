from rich.text import Text

from devcycle.core.command_types import Command
from devcycle.core.command_types import Operation
from devcycle.core.run_types import PENDING
from devcycle.core.run_types import RunReport
from devcycle.core.run_types import RunStage
from devcycle.core.run_types import RunState
from devcycle.core.run_types import SUCCEEDED
from devcycle.core.run_types import failed
from devcycle.core.run_types import running
from devcycle.core.shell_interface import ShellInterface
from devcycle.helpers.jobs_result import JobResult
from devcycle.helpers.state_keeper import StateKeeper
from devcycle.output.console import CONSOLE
from devcycle.output.styles import Style


def is_finished(state: RunState) -> bool:
    return state.stage in (RunStage.SUCCEEDED, RunStage.FAILED)


class OperationSequencer:
    """
    Runs operation commands one by one, stops on the first failed required
    command and reports its exit code as is.
    """

    def __init__(self, shell: ShellInterface):
        self._shell = shell

    def run(self, operation: Operation) -> RunReport:
        state_keeper = StateKeeper(PENDING, is_terminal=is_finished)
        executed: list[Command] = []
        exit_code = 0

        for step, command in enumerate(operation.commands, start=1):
            state_keeper.update_state(running(step))
            result = self._shell.run(command)
            executed += [command]

            if result == JobResult.GOOD:
                exit_code = 0
                continue

            if not command.required:
                CONSOLE.print(
                    Text(f'devcycle: [{operation.name}] Error {result.exit_code} ', style=Style.suspicious)
                    .append(Text('(ignored)', style=Style.regular))
                )
                exit_code = 0
                continue

            state_keeper.update_state(failed(step, result.at_step(step)))
            return RunReport(operation.name, state_keeper.state, result.exit_code, tuple(executed))

        state_keeper.update_state(SUCCEEDED)
        return RunReport(operation.name, state_keeper.state, exit_code, tuple(executed))
