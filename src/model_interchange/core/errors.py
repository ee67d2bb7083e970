from enum import StrEnum


class JmiErrorKind(StrEnum):
    INVALID_FORMAT = "invalid_format"
    NOT_IMPLEMENTED = "not_implemented"
    NOT_FOUND = "not_found"


_STATUS_CODES = {
    JmiErrorKind.INVALID_FORMAT: 400,
    JmiErrorKind.NOT_FOUND: 404,
    JmiErrorKind.NOT_IMPLEMENTED: 501,
}


class JmiError(Exception):
    """Base error carrying a kind tag and a human readable message."""

    kind: JmiErrorKind = JmiErrorKind.INVALID_FORMAT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return _STATUS_CODES.get(self.kind, 500)

    def to_dict(self) -> dict[str, str]:
        return {"error": str(self.kind), "message": self.message}


class DataFormatError(JmiError):
    kind = JmiErrorKind.INVALID_FORMAT


class ConversionNotImplementedError(JmiError):
    kind = JmiErrorKind.NOT_IMPLEMENTED


class ElementNotFoundError(JmiError):
    kind = JmiErrorKind.NOT_FOUND
