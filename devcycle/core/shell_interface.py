import signal
import subprocess
import sys
from pathlib import Path

from rich.text import Text

from devcycle.core.command_types import Command
from devcycle.core.command_types import FeatureSet
from devcycle.core.config import Config
from devcycle.helpers.jobs_result import JobResult
from devcycle.helpers.jobs_result import OperationError
from devcycle.output.console import CONSOLE
from devcycle.output.styles import Style

# POSIX shell conventions
COMMAND_NOT_EXECUTABLE = 126
COMMAND_NOT_FOUND = 127
SIGNAL_EXIT_BASE = 128
INTERRUPTED = SIGNAL_EXIT_BASE + signal.SIGINT


def exit_code_from_returncode(returncode: int) -> int:
    if returncode < 0:
        return SIGNAL_EXIT_BASE - returncode
    return returncode


class ShellInterface:
    def __init__(self, cfg: Config):
        self.root: Path = cfg.project_root
        self.execution_envs: dict[str, str] = cfg.environment
        self.isolate_standalone_target = cfg.isolate_standalone_target
        self.standalone_target_dir = cfg.standalone_target_dir
        self.verbose = not cfg.quiet

    def command_env(self, command: Command) -> dict[str, str]:
        overrides = {}
        if command.feature_set == FeatureSet.STANDALONE and self.isolate_standalone_target:
            overrides['CARGO_TARGET_DIR'] = str(self.standalone_target_dir)
        return overrides | (command.env or {})

    def describe(self, command: Command) -> Text:
        overrides = self.command_env(command)
        text = Text('')
        if overrides:
            text.append(Text(
                ' '.join(f'{k}={v}' for k, v in overrides.items()) + ' ',
                style=Style.regular
            ))
        text.append(Text(str(command), style=Style.context))
        if not command.required:
            text.append(Text(' (ignore errors)', style=Style.suspicious))
        return text

    def run(self, command: Command) -> JobResult | OperationError:
        sys.stdout.flush()
        env = self.execution_envs | self.command_env(command)

        if self.verbose:
            CONSOLE.print(self.describe(command))

        try:
            process = subprocess.Popen(command.argv, env=env, cwd=self.root)
        except FileNotFoundError as e:
            CONSOLE.print(Text(f'{e.filename}: {e.strerror}', style=Style.bad))
            return OperationError(str(e), exit_code=COMMAND_NOT_FOUND, command=str(command))
        except PermissionError as e:
            CONSOLE.print(Text(f'{e.filename}: {e.strerror}', style=Style.bad))
            return OperationError(str(e), exit_code=COMMAND_NOT_EXECUTABLE, command=str(command))

        try:
            returncode = process.wait()
        except KeyboardInterrupt:
            # child is in the same foreground group and got the signal too
            process.wait()
            raise

        exit_code = exit_code_from_returncode(returncode)
        if exit_code != 0:
            return OperationError(
                f'{command} exited with {exit_code}',
                exit_code=exit_code,
                command=str(command),
            )
        return JobResult.GOOD
