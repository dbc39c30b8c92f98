import vedro
from vedro import catched

from contexts.fake_tools import project_dir
from contexts.operations_file import operations_file
from devcycle.core.service import DevCycleService
from devcycle.errors import OperationsFileError
from helpers.configs import make_config
from helpers.recording_shell import make_recording_shell


class Scenario(vedro.Scenario):
    def given_broken_operations_file(self):
        self.root = project_dir()
        self.filename = operations_file(self.root, '''
operations:
  watch:
    - sqlx db create
   - cargo watch -x run
''')

    def when_user_loads_service(self):
        with catched(OperationsFileError) as self.exc_info:
            DevCycleService(make_config(self.root), shell_interface=make_recording_shell())

    def then_it_should_raise_operations_file_error(self):
        assert self.exc_info.type is OperationsFileError
        assert 'bad yaml format' in str(self.exc_info.value)
        assert self.exc_info.value.filename == self.filename
