import vedro
from d42 import schema

from devcycle.core.service import DevCycleService
from helpers.configs import make_config
from helpers.recording_shell import make_recording_shell


class Scenario(vedro.Scenario):
    def given_compose_plugin_configured(self):
        self.shell = make_recording_shell()
        self.service = DevCycleService(
            make_config(compose_command=['docker', 'compose']),
            shell_interface=self.shell,
            profile='database',
        )

    def when_user_runs_down(self):
        self.service.run('down')

    def then_it_should_call_configured_compose_command(self):
        assert self.shell.calls == schema.list([schema.str('docker compose down')])
