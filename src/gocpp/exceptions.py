class GocppError(Exception):
    pass


class ToolchainNotFoundError(GocppError):
    pass


class InvalidStandardError(GocppError):
    pass


class InvalidSettingsError(GocppError):
    pass


class SourceNotFoundError(GocppError):
    pass


class CompilationError(GocppError):
    pass


class ExecutionError(GocppError):
    pass
