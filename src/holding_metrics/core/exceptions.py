"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when a raw price series (or other input) is malformed."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class InvalidRangeError(AppError):
    """Raised when a range ends before it starts."""

    def __init__(self, start: str, end: str):
        super().__init__(
            f"Range start {start} is after range end {end}",
            code="INVALID_RANGE",
        )


class UnknownWindowError(AppError):
    """Raised for a window identifier outside the known set."""

    def __init__(self, window_id: object, valid: list[str]):
        super().__init__(
            f"Unknown time window: {window_id!r}. Valid options: {', '.join(valid)}",
            code="UNKNOWN_WINDOW",
        )


class InvalidAmountError(AppError):
    """Raised when the held amount is negative or not a number."""

    def __init__(self, amount: object):
        super().__init__(
            f"Amount held must be a non-negative number, got {amount!r}",
            code="INVALID_AMOUNT",
        )


class InvalidPriceError(AppError):
    """Raised when a current or start price cannot produce metrics."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_PRICE")


class InvalidPeriodError(AppError):
    """Raised when the measurement period is empty or reversed."""

    def __init__(self, start: str, end: str):
        super().__init__(
            f"Period start {start} must be strictly before end {end}",
            code="INVALID_PERIOD",
        )


class SeriesLoadError(AppError):
    """Raised when the persisted price series cannot be read."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Failed to load price series from {source}: {reason}",
            code="SERIES_LOAD_ERROR",
        )


class PriceUnavailableError(AppError):
    """Raised when no live, cached or historical price can be produced."""

    def __init__(self, reason: str):
        super().__init__(
            f"No current price available: {reason}",
            code="PRICE_UNAVAILABLE",
        )
