"""Errors raised by the in/out buffer types."""

__all__ = ["IntoArrayError", "NotEqualError", "OutIsTooSmallError"]


class IntoArrayError(ValueError):
    """A buffer could not be viewed as an array of the requested size."""

    def __init__(self, message: str = "Failed to convert into array.") -> None:
        super().__init__(message)


class NotEqualError(ValueError):
    """Input and output buffers have different lengths."""

    def __init__(
        self, message: str = "Length of input slices is not equal to each other"
    ) -> None:
        super().__init__(message)


class OutIsTooSmallError(ValueError):
    """The output buffer is smaller than the input buffer."""

    def __init__(self, message: str = "Output buffer is smaller than input") -> None:
        super().__init__(message)