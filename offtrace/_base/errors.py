class OfftraceError(Exception):
    pass


class InvalidArgumentError(OfftraceError, ValueError):
    pass


class SpaceError(OfftraceError):
    pass


class ActionSpaceError(SpaceError):
    pass


class ObservationSpaceError(SpaceError):
    pass
