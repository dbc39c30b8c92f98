from devcycle.core.command_types import Command
from devcycle.core.command_types import FeatureSet
from devcycle.core.command_types import Operation
from devcycle.core.command_types import OperationTable
from devcycle.core.command_types import Profile
from devcycle.core.config import Config
from devcycle.errors import UnknownProfileError


def compose(cfg: Config, *args: str, description: str = '') -> Command:
    return Command(argv=(*cfg.compose_command, *args), description=description)


def cargo(cfg: Config, *args: str, description: str = '',
          feature_set: FeatureSet = FeatureSet.DEFAULT) -> Command:
    return Command(
        argv=(*cfg.cargo_command, *args),
        description=description,
        feature_set=feature_set,
    )


def sqlx(cfg: Config, *args: str, description: str = '') -> Command:
    return Command(argv=(*cfg.sqlx_command, *args), description=description)


def make_test_operations(cfg: Config) -> list[Operation]:
    return [
        Operation('test', (
            cargo(cfg, 'test', description='run test suite'),
        )),
        Operation('test-standalone', (
            cargo(cfg, 'test', '--no-default-features',
                  description='run test suite without default features',
                  feature_set=FeatureSet.STANDALONE),
        ), aliases=('test-s',)),
    ]


def make_database_profile(cfg: Config) -> OperationTable:
    return OperationTable(
        Profile.DATABASE.value,
        Operation('build', (
            compose(cfg, 'build', description='build service images'),
        )),
        Operation('up', (
            compose(cfg, 'up', '-d', description='start containers in background'),
        )),
        Operation('down', (
            compose(cfg, 'down', description='stop and remove containers'),
        )),
        Operation('watch', (
            sqlx(cfg, 'db', 'create', description='create database'),
            sqlx(cfg, 'migrate', 'run', description='apply pending migrations'),
            cargo(cfg, 'watch', '-x', 'run', description='rebuild and rerun on change'),
        )),
        *make_test_operations(cfg),
    )


def make_minimal_profile(cfg: Config) -> OperationTable:
    # no `down` here, calling it is a usage error
    return OperationTable(
        Profile.MINIMAL.value,
        Operation('build', (
            compose(cfg, 'build', description='build service images'),
        )),
        Operation('up', (
            compose(cfg, 'up', description='start containers attached'),
        )),
        Operation('watch', (
            cargo(cfg, 'watch', '-x', 'run', description='rebuild and rerun on change'),
        )),
        *make_test_operations(cfg),
    )


BUILTIN_PROFILES = {
    Profile.DATABASE.value: make_database_profile,
    Profile.MINIMAL.value: make_minimal_profile,
}


def get_builtin_profile(name: str, cfg: Config) -> OperationTable:
    if name not in BUILTIN_PROFILES:
        raise UnknownProfileError(name, Profile.builtin_names())
    return BUILTIN_PROFILES[name](cfg)
