"""Result type used by color lookups instead of raise-and-catch control flow."""

from typing import TypeVar, Generic, Union, Callable, Any
from dataclasses import dataclass
import logging

T = TypeVar('T')
E = TypeVar('E', bound=Exception)


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful result."""
    value: T

    def is_success(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the success value."""
        return self.value


@dataclass(frozen=True)
class Error(Generic[E]):
    """Represents an error result."""
    error: E

    def is_success(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Raise the error (should not be called on Error)."""
        if isinstance(self.error, Exception):
            raise self.error
        else:
            raise RuntimeError(f"Result contains error: {self.error}")


# Type alias for convenience
Result = Union[Success[T], Error[E]]


def success(value: T) -> Success[T]:
    """Create a successful result."""
    return Success(value)


def error(err: E) -> Error[E]:
    """Create an error result."""
    return Error(err)


def safe_call(func: Callable[..., T], *args, **kwargs) -> Result[T, Exception]:
    """
    Safely call a function and return a Result.

    Args:
        func: Function to call
        *args: Positional arguments
        **kwargs: Keyword arguments

    Returns:
        Success with return value or Error with exception
    """
    try:
        result = func(*args, **kwargs)
        return success(result)
    except Exception as e:
        logging.debug(f"safe_call caught exception: {e}")
        return error(e)


def first_success(attempts) -> Result[T, list]:
    """
    Evaluate lazily produced Results in order and return the first success.

    ``attempts`` is an iterable of zero-argument callables returning Results;
    evaluation stops at the first success. If none succeed, an Error holding
    every collected error is returned.
    """
    errors = []

    for attempt in attempts:
        result = attempt()
        if result.is_success():
            return result
        errors.append(result.error)

    return error(errors)
