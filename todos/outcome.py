"""
Fetch outcome data types and execution context markers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Union

SSR_ERROR_MESSAGE = "could not fetch ssr data"


class ExecutionContext(str, Enum):
    """Where a page tree is being built"""
    PRODUCING = "producing"  # HTTP request handler building the initial document
    CONSUMING = "consuming"  # live session driving the delivered page


class _Unknown:
    """Sentinel for a todo collection that has not been loaded yet"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNKNOWN"

    def __bool__(self) -> bool:
        return False


UNKNOWN = _Unknown()


@dataclass(frozen=True)
class Success:
    """Resolution produced a todo collection"""
    todos: List[Any]


@dataclass(frozen=True)
class Failure:
    """Resolution failed; message is shown to the user as-is"""
    message: str = SSR_ERROR_MESSAGE


FetchOutcome = Union[Success, Failure]
