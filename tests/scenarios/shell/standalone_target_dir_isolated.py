import vedro
from vedro import params

from contexts.fake_tools import devcycle_environ
from contexts.fake_tools import fake_tool
from contexts.fake_tools import fake_tools_dir
from contexts.fake_tools import project_dir
from contexts.fake_tools import tool_calls
from devcycle.core.service import DevCycleService
from helpers.configs import make_config


class Scenario(vedro.Scenario):
    subject = 'standalone target dir isolation: {isolate}'

    @params(True)
    @params(False)
    def __init__(self, isolate):
        self.isolate = isolate

    def given_test_runner(self):
        self.tools = fake_tools_dir()
        fake_tool(self.tools, 'cargo', log_env=('CARGO_TARGET_DIR',))
        devcycle_environ(PATH=str(self.tools), CARGO_TARGET_DIR='')

    def given_service(self):
        self.root = project_dir()
        self.service = DevCycleService(
            make_config(self.root, isolate_standalone_target=self.isolate),
            profile='database',
            quiet=True,
        )

    def when_user_runs_both_test_operations(self):
        self.service.run('test')
        self.service.run('test-standalone')

    def then_test_runner_should_get_expected_target_dirs(self):
        standalone_target = f'{self.root / "target" / "standalone"}' if self.isolate else ''
        assert tool_calls(self.tools) == [
            'cargo test CARGO_TARGET_DIR=',
            f'cargo test --no-default-features CARGO_TARGET_DIR={standalone_target}',
        ]
