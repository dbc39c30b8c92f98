class DevCycleError(Exception):
    ...


class UnknownProfileError(DevCycleError):
    def __init__(self, profile: str, known: list[str]):
        self.profile = profile
        self.known = known
        super().__init__(f'Unknown profile "{profile}", choose one of: {", ".join(known)}')


class UnknownOperationError(DevCycleError):
    def __init__(self, operation: str, profile: str, known: list[str]):
        self.operation = operation
        self.profile = profile
        self.known = known
        super().__init__(
            f'Operation "{operation}" is not defined for profile "{profile}". '
            f'Available: {", ".join(known)}'
        )


class OperationsFileError(DevCycleError):
    def __init__(self, filename, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Can't load operations from {filename}: {reason}")


class RunStateError(Exception):
    ...
