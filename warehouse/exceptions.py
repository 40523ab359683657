class WarehouseError(Exception):
    """Base class for every error the warehouse raises on purpose."""


class LoadError(WarehouseError):
    """A data file could not be read or contains malformed/inconsistent rows."""


class InvalidArgumentError(WarehouseError, ValueError):
    """A caller supplied a value the warehouse refuses (bad price, unknown id...)."""


class UnsupportedOperationError(WarehouseError, NotImplementedError):
    """The requested report, export, chart or action is not implemented."""


class ReportDeliveryError(WarehouseError):
    """An exported report could not be delivered to its destination."""
