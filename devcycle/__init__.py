from devcycle.core.command_types import Command
from devcycle.core.command_types import FeatureSet
from devcycle.core.command_types import Operation
from devcycle.core.command_types import OperationTable
from devcycle.core.command_types import Profile
from devcycle.core.config import Config
from devcycle.core.run_types import RunReport
from devcycle.core.run_types import RunStage
from devcycle.core.service import DevCycleService
from devcycle.core.shell_interface import ShellInterface
from devcycle.version import get_version

__version__ = get_version()
__all__ = (
    'DevCycleService', 'ShellInterface', 'Config',
    'Command', 'Operation', 'OperationTable', 'Profile', 'FeatureSet',
    'RunReport', 'RunStage',
)
