import json
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Less = Callable[[T, T], bool]
Factory = Callable[[], Iterable[T]]


class Option(Generic[T]):
    """
    a value that may or may not be present.
    absent options serialize to json null, present ones to the inner value's json.
    """

    __slots__ = ('_has_value', '_value')

    def __init__(self, has_value: bool = False, value: Optional[T] = None):
        self._has_value = has_value
        self._value = value if has_value else None

    @classmethod
    def some(cls, value: T) -> 'Option[T]':
        return cls(True, value)

    @classmethod
    def none(cls) -> 'Option[T]':
        return cls(False)

    @property
    def has_value(self) -> bool: return self._has_value

    @property
    def value(self) -> Optional[T]:
        """the held value, or None when absent"""
        return self._value

    def value_or(self, default: T) -> T:
        return self._value if self._has_value else default

    def to_json(self) -> str:
        if not self._has_value:
            return "null"
        return json.dumps(self._value)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> 'Option[Any]':
        # json.loads raises ValueError on malformed input, leave that to the caller
        value = json.loads(text)
        if value is None:
            return cls.none()
        return cls.some(value)

    def __bool__(self) -> bool:
        return self._has_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._has_value == other._has_value and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._has_value, self._value))

    def __repr__(self) -> str:
        return f"Option.some({self._value!r})" if self._has_value else "Option.none()"
