class SimulatorError(Exception):
    pass


class BackingStoreUnavailable(SimulatorError):
    pass


class InputUnavailable(SimulatorError):
    pass


class InvalidAddress(SimulatorError, ValueError):
    pass
