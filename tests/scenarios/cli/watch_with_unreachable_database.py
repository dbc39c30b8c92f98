from functools import partial

import vedro

from contexts.fake_tools import devcycle_environ
from contexts.fake_tools import fake_tool
from contexts.fake_tools import fake_tools_dir
from contexts.fake_tools import project_dir
from contexts.fake_tools import tool_calls
from devcycle.cli import main
from devcycle.core.service import DevCycleService
from helpers.configs import make_config


class Scenario(vedro.Scenario):
    def given_migration_tool_without_database(self):
        self.tools = fake_tools_dir()
        fake_tool(self.tools, 'cargo')
        fake_tool(self.tools, 'sqlx', exit_code=1, output='error: error communicating with database')
        devcycle_environ(PATH=str(self.tools))

    def when_user_runs_watch(self):
        self.exit_code = main(['watch'], service_maker=partial(DevCycleService, make_config(project_dir())))

    def then_it_should_fail_with_migration_tool_exit_code(self):
        assert self.exit_code == 1

    def then_it_should_never_start_watcher(self):
        assert tool_calls(self.tools) == ['sqlx db create']
