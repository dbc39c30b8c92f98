from pathlib import Path

from rich.text import Text

from devcycle.core.command_types import Operation
from devcycle.core.command_types import OperationTable
from devcycle.core.config import Config
from devcycle.core.config import DEFAULT_PROFILE
from devcycle.core.operations_file import load_operations_file
from devcycle.core.operations_file import scan_for_operations_file
from devcycle.core.profiles import get_builtin_profile
from devcycle.core.run_types import RunReport
from devcycle.core.sequencer import OperationSequencer
from devcycle.core.shell_interface import ShellInterface
from devcycle.errors import UnknownOperationError
from devcycle.output.console import CONSOLE
from devcycle.output.logger import Logger
from devcycle.output.styles import Style


class DevCycleService:
    def __init__(self,
                 config=Config,
                 shell_interface: type[ShellInterface] = None,
                 profile: str = None,
                 operations_file: str | Path = None,
                 quiet: bool = None):
        cfg = config()
        if profile is not None:
            cfg.profile = profile
            # explicit profile wins over DEVCYCLE_FILE and discovered files
            cfg.operations_file = None
        if operations_file is not None:
            cfg.operations_file = Path(operations_file)
        if quiet is not None:
            cfg.quiet = quiet
        self._cfg = cfg

        if shell_interface is None:
            shell_interface = ShellInterface
        self._shell = shell_interface(cfg)
        self._sequencer = OperationSequencer(self._shell)

        self._operations: OperationTable = self._resolve_operations()

    def _resolve_operations(self) -> OperationTable:
        if self._cfg.operations_file is not None:
            return load_operations_file(self._cfg.project_root / self._cfg.operations_file)

        if self._cfg.profile is not None:
            return get_builtin_profile(self._cfg.profile, self._cfg)

        if (discovered := scan_for_operations_file(self._cfg.project_root)) is not None:
            return load_operations_file(discovered)

        return get_builtin_profile(DEFAULT_PROFILE, self._cfg)

    @property
    def operations(self) -> OperationTable:
        return self._operations

    def get_operation(self, name: str) -> Operation:
        if name not in self._operations:
            raise UnknownOperationError(name, self._operations.profile, self._operations.names())
        return self._operations[name]

    def run(self, name: str) -> RunReport:
        operation = self.get_operation(name)
        return self._sequencer.run(operation)

    def plan(self, name: str) -> list[Text]:
        plan = []
        for command in self.get_operation(name).commands:
            text = self._shell.describe(command)
            if command.description:
                text.append(Text(f'  # {command.description}', style=Style.context))
            plan += [text]
        return plan

    def print_plan(self, name: str) -> None:
        logger = Logger(CONSOLE)
        logger.log(
            Text('Operation ', style=Style.info)
            .append(Text(self.get_operation(name).name, style=Style.mark))
            .append(Text(f' ({self._operations.profile}):', style=Style.regular))
        )
        for step, text in enumerate(self.plan(name), start=1):
            logger.log(Text(f'  {step}. ', style=Style.regular).append(text))
        logger.flush()

    def print_operations(self) -> None:
        logger = Logger(CONSOLE)
        logger.log(
            Text('Profile ', style=Style.info)
            .append(Text(self._operations.profile, style=Style.mark))
            .append(Text(' operations:', style=Style.regular))
        )
        for operation in self._operations:
            aliases = f' (alias: {", ".join(operation.aliases)})' if operation.aliases else ''
            logger.log(
                Text(f'  {operation.name:<20}', style=Style.good)
                .append(Text(' && '.join(str(command) for command in operation.commands), style=Style.context))
                .append(Text(aliases, style=Style.regular))
            )
        logger.flush()
