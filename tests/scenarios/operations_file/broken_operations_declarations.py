import vedro
from vedro import catched
from vedro import params

from contexts.fake_tools import project_dir
from contexts.operations_file import operations_file
from devcycle.core.service import DevCycleService
from devcycle.errors import OperationsFileError
from helpers.configs import make_config
from helpers.recording_shell import make_recording_shell


class Scenario(vedro.Scenario):
    subject = 'reject operations file: {reason}'

    @params('profile: api\n', 'no "operations" section')
    @params('- just a list\n', 'expected mapping on top level')
    @params('operations:\n  up: []\n', 'operation "up" should be a non-empty list of commands')
    @params('operations:\n  up:\n    - env: {A: b}\n', 'has no "cmd" key')
    @params('operations:\n  up:\n    - cmd: run\n      retries: 3\n', 'unknown keys: retries')
    @params('operations:\n  up: run\naliases:\n  u: start\n', 'points to unknown operation "start"')
    @params('operations:\n  up: "\'unclosed"\n', 'No closing quotation')
    @params('operations:\n  up: run\naliases:\n  u: [up]\n', 'alias "u" should point to operation name')
    @params('operations:\n  up:\n    - cmd: run\n      required: "false"\n', 'required should be true or false')
    def __init__(self, content, reason):
        self.content = content
        self.reason = reason

    def given_operations_file(self):
        self.root = project_dir()
        operations_file(self.root, self.content)

    def when_user_loads_service(self):
        with catched(OperationsFileError) as self.exc_info:
            DevCycleService(make_config(self.root), shell_interface=make_recording_shell())

    def then_it_should_explain_what_is_wrong(self):
        assert self.exc_info.type is OperationsFileError
        assert self.reason in str(self.exc_info.value)
