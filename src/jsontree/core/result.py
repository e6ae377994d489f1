"""
Ok/Err outcomes for the document pipeline.

Parsing text and resolving a search query can both fail on ordinary user
input. Those failures travel back as ``Err`` values rather than exceptions,
so a session can report "Invalid JSON" or an empty query and carry on with
the tree it already has.

    result = map_ok(parse_document(text), build_tree)
    if result.is_err():
        ...  # keep the previous graph
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A parsed document, a built graph or a resolved node id."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self):
        raise ValueError(f"Expected an error, got a value: {self.value!r}")


@dataclass(frozen=True)
class Err(Generic[E]):
    """
    A rejected input. ``error`` is a ``JsonTreeError`` subclass for
    everything the core produces.
    """
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise ValueError(f"Expected a value, got an error: {self.error}")

    def unwrap_err(self) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]


def map_ok(result: Result[T, E], func: Callable[[T], U]) -> Result[U, E]:
    """Run the next pipeline step on a value; an error passes through untouched."""
    if isinstance(result, Err):
        return result
    return Ok(func(result.value))
