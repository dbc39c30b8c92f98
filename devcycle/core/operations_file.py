import shlex
from pathlib import Path

import yaml
from yaml import YAMLError

from devcycle.core.command_types import Command
from devcycle.core.command_types import FeatureSet
from devcycle.core.command_types import Operation
from devcycle.core.command_types import OperationTable
from devcycle.core.command_types import Profile
from devcycle.core.config import DEFAULT_OPERATIONS_FILES
from devcycle.errors import OperationsFileError

COMMAND_FORMATS = (
    'operations:\n'
    '  name:\n'
    '    - command arg\n'
    '    - -optional command arg\n'
    '    - cmd: command arg\n'
    '      env: {KEY: value}\n'
    '      required: false\n'
    '      standalone: true\n'
)


def read_operations_file(filename: str | Path) -> dict:
    try:
        with open(filename, encoding='utf-8') as f:
            cfg = yaml.load(f, Loader=yaml.FullLoader)
    except UnicodeDecodeError as e:
        raise OperationsFileError(filename, f'not utf-8 encoded, {e.reason} at byte {e.start}') from e
    except OSError as e:
        raise OperationsFileError(filename, e.strerror or str(e)) from e
    except YAMLError as e:
        raise OperationsFileError(filename, f'bad yaml format\n{e}') from e

    if not isinstance(cfg, dict):
        raise OperationsFileError(filename, f'expected mapping on top level, got: {cfg!r}')
    return cfg


def scan_for_operations_file(root: Path) -> Path | None:
    for name in DEFAULT_OPERATIONS_FILES:
        if (root / name).is_file():
            return root / name
    return None


def _split(filename, operation: str, cmd) -> tuple[str, ...]:
    if isinstance(cmd, list) and cmd and all(isinstance(part, str) for part in cmd):
        return tuple(cmd)
    if isinstance(cmd, str):
        try:
            argv = tuple(shlex.split(cmd))
        except ValueError as e:
            raise OperationsFileError(filename, f'operation "{operation}": {e} in "{cmd}"') from e
        if argv:
            return argv
    raise OperationsFileError(filename, f'operation "{operation}" has empty or broken command: {cmd!r}\n'
                                        f'should match one of formats:\n{COMMAND_FORMATS}')


def parse_command(filename, operation: str, command) -> Command:
    if isinstance(command, str):
        required = not command.startswith('-')
        return Command(
            argv=_split(filename, operation, command.removeprefix('-') if not required else command),
            required=required,
        )

    if isinstance(command, dict):
        if 'cmd' not in command:
            raise OperationsFileError(filename, f'operation "{operation}" command {command} has no "cmd" key\n'
                                                f'should match one of formats:\n{COMMAND_FORMATS}')
        unknown = set(command) - {'cmd', 'env', 'required', 'description', 'standalone'}
        if unknown:
            raise OperationsFileError(filename, f'operation "{operation}" command has unknown keys: '
                                                f'{", ".join(sorted(unknown))}')
        env = command.get('env') or {}
        required = command.get('required', True)
        if not isinstance(required, bool):
            raise OperationsFileError(filename, f'operation "{operation}" required should be true or false, '
                                                f'got: {required!r}')
        if not isinstance(env, dict):
            raise OperationsFileError(filename, f'operation "{operation}" env should be mapping, got: {env!r}')
        return Command(
            argv=_split(filename, operation, command['cmd']),
            description=str(command.get('description', '')),
            required=required,
            env={str(k): str(v) for k, v in env.items()},
            feature_set=FeatureSet.STANDALONE if command.get('standalone') else FeatureSet.DEFAULT,
        )

    raise OperationsFileError(filename, f'operation "{operation}" command {command!r} '
                                        f'should match one of formats:\n{COMMAND_FORMATS}')


def parse_operations(filename, cfg: dict) -> OperationTable:
    operations_cfg = cfg.get('operations')
    if not isinstance(operations_cfg, dict) or not operations_cfg:
        raise OperationsFileError(filename, f'no "operations" section, should match format:\n{COMMAND_FORMATS}')

    aliases_cfg = cfg.get('aliases') or {}
    if not isinstance(aliases_cfg, dict):
        raise OperationsFileError(filename, f'"aliases" should be mapping, got: {aliases_cfg!r}')
    for alias, target in aliases_cfg.items():
        if not isinstance(target, str):
            raise OperationsFileError(filename, f'alias "{alias}" should point to operation name, got: {target!r}')
        if target not in operations_cfg:
            raise OperationsFileError(filename, f'alias "{alias}" points to unknown operation "{target}"')
        if alias in operations_cfg:
            raise OperationsFileError(filename, f'alias "{alias}" shadows operation with same name')

    operations = []
    for name, commands in operations_cfg.items():
        if isinstance(commands, (str, dict)):
            commands = [commands]
        if not isinstance(commands, list) or not commands:
            raise OperationsFileError(filename, f'operation "{name}" should be a non-empty list of commands')
        operations += [
            Operation(
                name=str(name),
                commands=tuple(parse_command(filename, name, command) for command in commands),
                aliases=tuple(alias for alias, target in aliases_cfg.items() if target == name),
            )
        ]

    return OperationTable(str(cfg.get('profile', Profile.CUSTOM.value)), *operations)


def load_operations_file(filename: str | Path) -> OperationTable:
    return parse_operations(filename, read_operations_file(filename))
