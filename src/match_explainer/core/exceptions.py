"""Custom exceptions for Match Explainer."""


class ExplainerError(Exception):
    """Base exception for explanation operations."""

    pass


class TelemetryError(ExplainerError):
    """Raised when raw engine telemetry is structurally invalid."""

    pass


class MissingTelemetryError(TelemetryError):
    """Raised when a required telemetry section is absent or malformed."""

    def __init__(self, section: str, message: str = ""):
        self.section = section
        super().__init__(message or f"Missing required telemetry section: {section}")


class UnknownCodeError(TelemetryError):
    """Raised when an enumerated engine code has an unrecognised value."""

    def __init__(self, field: str, code: str):
        self.field = field
        self.code = code
        super().__init__(f"Unrecognised {field} value: '{code}'")


class EngineError(ExplainerError):
    """Raised when the resolution engine fails or returns unreadable output."""

    def __init__(self, operation: str, message: str = ""):
        self.operation = operation
        super().__init__(message or f"Engine operation failed: {operation}")
