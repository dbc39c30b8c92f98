import vedro
from d42 import schema

from devcycle.core.service import DevCycleService
from helpers.configs import make_config
from helpers.recording_shell import make_recording_shell


class Scenario(vedro.Scenario):
    def given_project(self):
        self.shell = make_recording_shell()
        self.service = DevCycleService(make_config(), shell_interface=self.shell, profile='database')

    def when_user_runs_both_test_operations(self):
        self.service.run('test')
        self.service.run('test-standalone')

    def then_only_standalone_run_should_disable_default_features(self):
        assert self.shell.calls == schema.list([
            schema.str('cargo test'),
            schema.str('cargo test --no-default-features'),
        ])

    def then_runs_should_not_share_target_dir(self):
        default_env, standalone_env = self.shell.environments
        assert 'CARGO_TARGET_DIR' not in default_env
        assert standalone_env['CARGO_TARGET_DIR'].endswith('standalone')
