from typing import Generic, TypeVar, Optional, Callable, Union
from http import HTTPStatus

T = TypeVar('T')  # Generic type variable
U = TypeVar('U')  # Type produced by chained operations

StatusLike = Union[int, HTTPStatus]


class Result(Generic[T]):
    """
    Outcome of a service operation: either a value or an error message,
    together with the HTTP status the API layer should answer with.

    Attributes:
        success (bool): Whether the operation succeeded
        data (Optional[T]): The produced value (only when success is True)
        error (Optional[str]): Error message (only when success is False)
        status_code (HTTPStatus): 200 for success, 400 for failure unless given
    """
    def __init__(
        self,
        success: bool,
        data: Optional[T] = None,
        error: Optional[str] = None,
        status_code: Optional[StatusLike] = None
    ):
        self.success = success
        self.data = data
        self.error = error

        if status_code is None:
            self.status_code = HTTPStatus.OK if success else HTTPStatus.BAD_REQUEST
        else:
            self.status_code = HTTPStatus(status_code)

    @classmethod
    def ok(cls, data: T, status_code: StatusLike = HTTPStatus.OK) -> "Result[T]":
        """Wrap a successful value."""
        return cls(success=True, data=data, status_code=status_code)

    @classmethod
    def fail(cls, error: str, status_code: StatusLike = HTTPStatus.BAD_REQUEST) -> "Result[T]":
        """Wrap an error message with the given status (400 by default)."""
        return cls(success=False, error=error, status_code=status_code)

    @classmethod
    def not_found(cls, error: str = "Resource not found") -> "Result[T]":
        """Failure with 404 NOT_FOUND, used for missing workbooks."""
        return cls(success=False, error=error, status_code=HTTPStatus.NOT_FOUND)

    @classmethod
    def invalid_input(cls, error: str = "Invalid input data") -> "Result[T]":
        """Failure with 400 BAD_REQUEST, used for bad ranks and unusable data."""
        return cls(success=False, error=error, status_code=HTTPStatus.BAD_REQUEST)

    @classmethod
    def server_error(cls, error: str = "Internal server error") -> "Result[T]":
        """Failure with 500 INTERNAL_SERVER_ERROR for unexpected exceptions."""
        return cls(success=False, error=error, status_code=HTTPStatus.INTERNAL_SERVER_ERROR)

    def is_success(self) -> bool:
        return self.success

    def is_failure(self) -> bool:
        return not self.success

    def and_then(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        """
        Chain a step that itself returns a Result.

        A failure short-circuits: the error and status code are carried over
        unchanged and ``fn`` is never called.

        Args:
            fn (Callable[[T], Result[U]]): Next step, fed with this Result's value

        Returns:
            Result[U]: The carried-over failure or whatever ``fn`` returned
        """
        if not self.is_success():
            return Result.fail(self.error or "", status_code=self.status_code)  # type: ignore
        return fn(self.data)  # type: ignore

    def error_message(self) -> str:
        """
        Build the client-facing error text.

        Returns:
            str: ``"Error: <message>"``
        """
        return f"Error: {self.error or 'Operation failed'}"

    def __repr__(self) -> str:
        return f"Result(success={self.success}, status_code={self.status_code!r}, data={self.data!r}, error={self.error!r})"
