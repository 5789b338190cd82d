"""
S3 path types.

Provides two representations of a slash-delimited object-storage key:

- S3PathBuf: an owned, mutable buffer of validated components. This is the
  type paths are normally built, extended and handed to consumers through.
- S3Path: a read-only view over validated components. Views handed out by
  S3PathBuf.as_path() alias the buffer's component list instead of copying it;
  mutating the buffer afterwards invalidates them.

Every component in either representation has passed validate_component(),
so str(path) is always a safe storage key and to_std_path() never escapes
its root.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .errors import InvalidS3PathComponent, StaleS3PathView
from .validation import validate_component

__all__ = ["SEPARATOR", "S3Path", "S3PathBuf", "AnyS3Path", "s3_path", "s3_path_buf", "to_s3_path_buf"]

logger = logging.getLogger(__name__)

SEPARATOR = "/"


def _validated(components: Iterable[str]) -> List[str]:
    """Validate components in order and collect them, failing on the first bad one."""
    if isinstance(components, str):
        raise TypeError("Expected an iterable of components, got str (use S3PathBuf.parse for delimited keys)")
    validated = []
    for component in components:
        validate_component(component)
        validated.append(component)
    return validated


def _check_index(index: Any) -> None:
    # Slices are not supported; use parts or parent() instead
    if not isinstance(index, int):
        raise TypeError(f"S3 path indices must be integers, not {type(index).__name__}")


class _S3PathBase:
    """Read-only behaviour shared by S3Path and S3PathBuf."""

    __slots__ = ()

    def __len__(self) -> int:
        raise NotImplementedError

    def __iter__(self) -> Iterator[str]:
        raise NotImplementedError

    def __getitem__(self, index: int) -> str:
        raise NotImplementedError

    def is_empty(self) -> bool:
        return len(self) == 0

    def get(self, index: int) -> Optional[str]:
        """Return the component at index, or None when out of range."""
        try:
            return self[index]
        except IndexError:
            return None

    def last(self) -> Optional[str]:
        """Return the final component, or None for the empty path."""
        return self.get(-1)

    @property
    def parts(self) -> tuple[str, ...]:
        """Tuple of path components."""
        return tuple(self)

    def join(self, component: str) -> S3PathBuf:
        """
        Return a new buffer equal to this path plus one component.

        Neither this path nor any buffer it aliases is modified.

        Raises:
            InvalidS3PathComponent: If component fails validation
        """
        validate_component(component)
        return S3PathBuf._from_validated([*self, component])

    def __truediv__(self, component: str) -> S3PathBuf:
        return self.join(component)

    def to_std_path(self, root: Union[str, Path, None] = None) -> Path:
        """
        Convert to a local filesystem path.

        Components are joined with the host's native separator. This is safe
        because no component can contain a separator or be a traversal.

        Args:
            root: Optional directory to place the path under

        Returns:
            root/<component>/... (or a relative path when root is None;
            the empty path maps to root itself, or '.')
        """
        base = Path(root) if root is not None else Path()
        return base.joinpath(*self)

    def __str__(self) -> str:
        return SEPARATOR.join(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _S3PathBase):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))


class S3Path(_S3PathBase):
    """
    A borrowed, read-only S3 path.

    Either built directly from caller-held components (validated here) or
    obtained from S3PathBuf.as_path(), in which case it aliases the buffer's
    component list. An aliasing view records the buffer's generation and
    raises StaleS3PathView once the buffer has been pushed to or popped.

    Examples:
        >>> S3Path(["models", "v1"])
        S3Path('models/v1')

        >>> S3Path(["models", "v1"]).parent()
        S3Path('models')
    """

    __slots__ = ("_components", "_length", "_source", "_generation")

    def __init__(self, components: Iterable[str] = ()):
        """
        Build a view from caller-supplied components.

        One-shot iterables (generators) are consumed once and kept, so the
        resulting view can be iterated any number of times.

        Raises:
            InvalidS3PathComponent: If any component fails validation
            TypeError: If components is a str or contains non-str items
        """
        validated = tuple(_validated(components))
        self._components: Sequence[str] = validated
        self._length = len(validated)
        self._source: Optional[S3PathBuf] = None
        self._generation = 0

    @classmethod
    def from_components(cls, components: Iterable[str]) -> S3Path:
        return cls(components)

    @classmethod
    def _alias(cls, components: Sequence[str], length: int,
               source: Optional[S3PathBuf], generation: int) -> S3Path:
        # Components are already validated; only the first `length` are visible.
        view = cls.__new__(cls)
        view._components = components
        view._length = length
        view._source = source
        view._generation = generation
        return view

    def _check_source(self) -> None:
        if self._source is not None and self._source._generation != self._generation:
            raise StaleS3PathView("S3Path view used after its source S3PathBuf was modified")

    def __len__(self) -> int:
        self._check_source()
        return self._length

    def __iter__(self) -> Iterator[str]:
        self._check_source()
        for i in range(self._length):
            self._check_source()
            yield self._components[i]

    def __getitem__(self, index: int) -> str:
        _check_index(index)
        self._check_source()
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("S3Path index out of range")
        return self._components[index]

    def __hash__(self) -> int:
        return hash(self.parts)

    def parent(self) -> Optional[S3Path]:
        """
        Return a view over all but the last component.

        Returns None only for the empty path; the parent of a single
        component path is the empty path. The parent shares this view's
        storage and source buffer.
        """
        self._check_source()
        if self._length == 0:
            return None
        return S3Path._alias(self._components, self._length - 1, self._source, self._generation)

    def to_owned(self) -> S3PathBuf:
        """Copy the components into a new, independent S3PathBuf."""
        return S3PathBuf._from_validated(list(self))


class S3PathBuf(_S3PathBase):
    """
    An owned, mutable S3 path.

    Examples:
        >>> path = S3PathBuf()
        >>> path.push("foo").push("bar")
        S3PathBuf('foo/bar')

        >>> S3PathBuf.parse("/foo//bar/")
        S3PathBuf('foo/bar')

        >>> S3PathBuf(["foo", "bar$baz"])
        IllegalCharacter: Invalid S3 path component 'bar$baz': Character '$' is not allowed
    """

    __slots__ = ("_components", "_generation")

    # Mutable, so unhashable.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, components: Iterable[str] = ()):
        """
        Build a buffer from components, failing fast on the first invalid one.

        Raises:
            InvalidS3PathComponent: If any component fails validation
            TypeError: If components is a str or contains non-str items
        """
        self._components: List[str] = _validated(components)
        self._generation = 0

    @classmethod
    def empty(cls) -> S3PathBuf:
        return cls()

    @classmethod
    def from_components(cls, components: Iterable[str]) -> S3PathBuf:
        return cls(components)

    @classmethod
    def _from_validated(cls, components: List[str]) -> S3PathBuf:
        path = cls.__new__(cls)
        path._components = components
        path._generation = 0
        return path

    @classmethod
    def parse(cls, text: str) -> S3PathBuf:
        """
        Parse a '/'-delimited key.

        Empty fragments from leading, trailing or repeated separators are
        skipped, so "/foo//bar/" and "foo/bar" parse identically. Every
        remaining fragment is validated in order.

        Args:
            text: Delimited key, e.g. "datasets/2024/train.csv"

        Returns:
            Parsed path ("" and "/" yield the empty path)

        Raises:
            InvalidS3PathComponent: On the first invalid fragment
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        try:
            return cls(c for c in text.split(SEPARATOR) if c)
        except InvalidS3PathComponent as e:
            logger.debug(f"Rejected S3 key {text!r}: {e}")
            raise

    def _modified(self) -> None:
        self._generation += 1

    def push(self, component: str) -> S3PathBuf:
        """
        Append one component and return self for chaining.

        The buffer is left unchanged if validation fails.

        Raises:
            InvalidS3PathComponent: If component fails validation
        """
        validate_component(component)
        self._components.append(component)
        self._modified()
        return self

    def extend(self, components: Iterable[str]) -> S3PathBuf:
        """
        Append many components and return self.

        All components are validated before any is appended.
        """
        validated = _validated(components)
        if validated:
            self._components.extend(validated)
            self._modified()
        return self

    def pop(self) -> Optional[str]:
        """Remove and return the last component, or None if the path is empty."""
        if not self._components:
            return None
        self._modified()
        return self._components.pop()

    def as_path(self) -> S3Path:
        """
        Borrow this buffer as an S3Path without copying.

        The view stays valid until the next push/extend/pop on this buffer.
        """
        return S3Path._alias(self._components, len(self._components), self, self._generation)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[str]:
        return iter(self._components)

    def __getitem__(self, index: int) -> str:
        _check_index(index)
        return self._components[index]

    def __copy__(self) -> S3PathBuf:
        return S3PathBuf._from_validated(list(self._components))

    def __deepcopy__(self, memo: dict) -> S3PathBuf:
        # Components are immutable str, so a shallow list copy is enough
        return self.__copy__()

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Allow S3PathBuf as a pydantic field type, validated from str and serialized to str."""
        from_str = core_schema.no_info_after_validator_function(cls.parse, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.no_info_plain_validator_function(_validate_field),
            serialization=core_schema.plain_serializer_function_ser_schema(lambda path: str(path)),
        )


AnyS3Path = Union[S3Path, S3PathBuf]


def to_s3_path_buf(value: Union[AnyS3Path, str, Iterable[str]]) -> S3PathBuf:
    """
    Coerce anything path-like to an S3PathBuf.

    - S3PathBuf: returned as is
    - S3Path: copied with to_owned()
    - str: parsed as a '/'-delimited key
    - other iterables: treated as a component sequence
    """
    if isinstance(value, S3PathBuf):
        return value
    if isinstance(value, S3Path):
        return value.to_owned()
    if isinstance(value, str):
        return S3PathBuf.parse(value)
    return S3PathBuf(value)


def _validate_field(value: Any) -> S3PathBuf:
    # pydantic only reports ValueError as a validation failure
    try:
        return to_s3_path_buf(value)
    except TypeError as e:
        raise ValueError(str(e)) from e


def s3_path(*components: str) -> S3Path:
    """Build an S3Path from positional components, validated left to right."""
    return S3Path(components)


def s3_path_buf(*components: str) -> S3PathBuf:
    """Build an S3PathBuf from positional components, validated left to right."""
    return S3PathBuf(components)
