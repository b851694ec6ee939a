"""Error codes reported by the PON adapter and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum


class PonAdapterErrno(IntEnum):
    """Status and error numbering used across the PON adapter."""

    EUNCHANGED = 2
    EAGAIN = 1
    SUCCESS = 0
    ERROR = -1
    ERR_NOT_FOUND = -2
    ERR_NOT_AVAIL = -3
    ERR_NO_MEMORY = -4
    ERR_NOT_SUPPORTED = -5
    ERR_NO_DATA = -6
    ERR_CONFIG_MISMATCH = -7
    ERR_RESOURCE_EXISTS = -8
    ERR_RESOURCE_NOT_AVAIL = -9
    ERR_RESOURCE_NOT_FOUND = -10
    ERR_MATCH_NOT_FOUND = -11
    ERR_INVALID_VAL = -12
    ERR_DRV = -13
    ERR_OMCI_MSG_FIFO_FULL = -14
    ERR_OMCI_ME_INVALID = -15
    ERR_OMCI_ME_NOT_FOUND = -16
    ERR_OMCI_ME_EXISTS = -17
    ERR_OMCI_ACTION = -18
    ERR_OMCI_ME_NOT_SUPPORTED = -19
    ERR_OMCI_ME_ATTR_INVALID = -20
    ERR_OMCI_ME_ACTION_INVALID = -21
    ERR_LOCKING = -22
    ERR_PTR_INVALID = -23
    ERR_OUT_OF_BOUNDS = -24
    ERR_IF_NOT_FOUND = -25
    ERR_SIZE = -26
    ERR_CRC = -27
    ERR_MEM_ACCESS = -28
    ERR_OMCI_MSG_INVALID_TCI = -29

    @property
    def description(self) -> str:
        """Human readable meaning of the code."""
        return _DESCRIPTIONS[self]

    @property
    def is_error(self) -> bool:
        """True for the negative (failure) codes."""
        return self.value < 0


_DESCRIPTIONS = {
    PonAdapterErrno.EUNCHANGED: "Status unchanged",
    PonAdapterErrno.EAGAIN: "Try again",
    PonAdapterErrno.SUCCESS: "Success",
    PonAdapterErrno.ERROR: "Unspecific error",
    PonAdapterErrno.ERR_NOT_FOUND: "Resource was not found",
    PonAdapterErrno.ERR_NOT_AVAIL: "Resource was not available",
    PonAdapterErrno.ERR_NO_MEMORY: "Memory allocation error",
    PonAdapterErrno.ERR_NOT_SUPPORTED: "The requested functionality is not supported",
    PonAdapterErrno.ERR_NO_DATA: "No data is available",
    PonAdapterErrno.ERR_CONFIG_MISMATCH: "Configuration mismatch",
    PonAdapterErrno.ERR_RESOURCE_EXISTS: "The resource exists",
    PonAdapterErrno.ERR_RESOURCE_NOT_AVAIL: "The resource is not available",
    PonAdapterErrno.ERR_RESOURCE_NOT_FOUND: "The resource has not been found",
    PonAdapterErrno.ERR_MATCH_NOT_FOUND: "A match has not been found",
    PonAdapterErrno.ERR_INVALID_VAL: "Invalid attribute value",
    PonAdapterErrno.ERR_DRV: "Driver request was not executed",
    PonAdapterErrno.ERR_OMCI_MSG_FIFO_FULL: "OMCI message FIFO is full",
    PonAdapterErrno.ERR_OMCI_ME_INVALID: "Managed Entity ID is invalid",
    PonAdapterErrno.ERR_OMCI_ME_NOT_FOUND: "Managed Entity was not found",
    PonAdapterErrno.ERR_OMCI_ME_EXISTS: "Managed Entity already exists",
    PonAdapterErrno.ERR_OMCI_ACTION: "OMCI action error",
    PonAdapterErrno.ERR_OMCI_ME_NOT_SUPPORTED: "Managed Entity class is not supported",
    PonAdapterErrno.ERR_OMCI_ME_ATTR_INVALID:
        "Managed Entity attribute position is out of range or invalid",
    PonAdapterErrno.ERR_OMCI_ME_ACTION_INVALID:
        "Managed Entity action is out of range or not supported",
    PonAdapterErrno.ERR_LOCKING: "Locking error",
    PonAdapterErrno.ERR_PTR_INVALID: "Pointer is invalid",
    PonAdapterErrno.ERR_OUT_OF_BOUNDS: "Parameters are out of bounds",
    PonAdapterErrno.ERR_IF_NOT_FOUND: "The interface implementation was not found",
    PonAdapterErrno.ERR_SIZE: "The size check was not successful",
    PonAdapterErrno.ERR_CRC: "The CRC check was not successful",
    PonAdapterErrno.ERR_MEM_ACCESS: "Invalid access to memory",
    PonAdapterErrno.ERR_OMCI_MSG_INVALID_TCI: "OMCI message received with invalid TCI header",
}


def _as_errno(code: int) -> PonAdapterErrno | int:
    try:
        return PonAdapterErrno(code)
    except ValueError:
        return int(code)


class PonAdapterError(Exception):
    """Raised when a PON adapter operation fails with a negative status code."""

    def __init__(self, code: int, message: str | None = None) -> None:
        self.code = _as_errno(code)
        if message is None:
            if isinstance(self.code, PonAdapterErrno):
                message = self.code.description
            else:
                message = f"Unknown error {self.code}"
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self.code)}, {self.message!r})"


def check(code: int) -> PonAdapterErrno | int:
    """Return a non-negative status code, raise PonAdapterError for a negative one."""
    if code < 0:
        raise PonAdapterError(code)
    return _as_errno(code)