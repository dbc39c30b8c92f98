import vedro
from vedro import catched

from devcycle.core.service import DevCycleService
from devcycle.errors import UnknownOperationError
from helpers.configs import make_config
from helpers.recording_shell import make_recording_shell


class Scenario(vedro.Scenario):
    def given_minimal_profile(self):
        self.shell = make_recording_shell()
        self.service = DevCycleService(make_config(), shell_interface=self.shell, profile='minimal')

    def when_user_runs_down(self):
        with catched(UnknownOperationError) as self.exc_info:
            self.service.run('down')

    def then_it_should_raise_usage_error(self):
        assert self.exc_info.type is UnknownOperationError
        assert self.exc_info.value.operation == 'down'
        assert self.exc_info.value.profile == 'minimal'

    def then_it_should_not_run_anything(self):
        assert self.shell.calls == []
