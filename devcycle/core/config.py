import os
import shlex
from pathlib import Path

DEFAULT_PROFILE = 'database'
DEFAULT_OPERATIONS_FILES = ('devcycle.yml', 'devcycle.yaml')


def _flag(value: str | None, default: bool) -> bool:
    if value is None or value == '':
        return default
    return value.strip().lower() not in ('0', 'false', 'no', 'off')


class Config:
    def __init__(self):
        self.profile: str | None = os.environ.get('DEVCYCLE_PROFILE') or None
        self.project_root: Path = Path(os.environ.get('DEVCYCLE_PROJECT_ROOT', os.getcwd()))
        operations_file = os.environ.get('DEVCYCLE_FILE')
        self.operations_file: Path | None = Path(operations_file) if operations_file else None
        self.quiet: bool = _flag(os.environ.get('DEVCYCLE_QUIET'), False)
        self.compose_command: list[str] = shlex.split(os.environ.get('DEVCYCLE_COMPOSE_COMMAND', 'docker-compose'))
        self.cargo_command: list[str] = shlex.split(os.environ.get('DEVCYCLE_CARGO_COMMAND', 'cargo'))
        self.sqlx_command: list[str] = shlex.split(os.environ.get('DEVCYCLE_SQLX_COMMAND', 'sqlx'))
        self.isolate_standalone_target: bool = _flag(
            os.environ.get('DEVCYCLE_ISOLATE_STANDALONE_TARGET'), True
        )
        self.cargo_target_dir: Path = Path(os.environ.get('CARGO_TARGET_DIR') or self.project_root / 'target')
        self.standalone_target_dir: Path = self.cargo_target_dir / 'standalone'
        # passed through to every child untouched
        self.environment: dict[str, str] = dict(os.environ)
