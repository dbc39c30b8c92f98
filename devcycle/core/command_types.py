import shlex
from enum import Enum
from typing import NamedTuple


class FeatureSet(Enum):
    DEFAULT = 'default'
    STANDALONE = 'standalone'


class Profile(Enum):
    DATABASE = 'database'
    MINIMAL = 'minimal'
    CUSTOM = 'custom'

    @classmethod
    def builtin_names(cls) -> list[str]:
        return [cls.DATABASE.value, cls.MINIMAL.value]


class Command(NamedTuple):
    argv: tuple[str, ...]
    description: str = ''
    required: bool = True
    env: dict[str, str] | None = None
    feature_set: FeatureSet = FeatureSet.DEFAULT

    def __str__(self):
        return shlex.join(self.argv)


class Operation(NamedTuple):
    name: str
    commands: tuple[Command, ...]
    aliases: tuple[str, ...] = ()

    def __str__(self):
        return self.name


class OperationTable:
    def __init__(self, profile: str, *operations: Operation):
        self.profile = profile
        self._operations: dict[str, Operation] = {
            operation.name: operation for operation in operations
        }
        self._aliases: dict[str, str] = {
            alias: operation.name
            for operation in operations
            for alias in operation.aliases
        }

    def __contains__(self, name: str) -> bool:
        return name in self._operations or name in self._aliases

    def __getitem__(self, name: str) -> Operation:
        return self._operations[self._aliases.get(name, name)]

    def __iter__(self):
        return iter(self._operations.values())

    def names(self) -> list[str]:
        return list(self._operations)

    def __repr__(self):
        return f'OperationTable({self.profile}, {self.names()})'
