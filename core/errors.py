# Simulator exceptions


class SimulatorError(Exception):
    """Base class for every error the simulator reports to the user."""


class ConfigError(SimulatorError):
    pass


class MetaDataError(SimulatorError):
    pass


class SimulationAborted(SimulatorError):
    """Raised by the execution engine when an operation fails validation.

    The message is the validation error that was already written to the sink.
    """
