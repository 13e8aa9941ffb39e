"""Parsed query string.

Read-only ``Mapping[str, str]`` (first value wins) over ``parse_qs``
output. Blank values are kept, so ``?files=`` is present but empty.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs


class QueryParams(Mapping[str, str]):
    __slots__ = ("_raw", "_values")

    def __init__(self, query_string: bytes = b"") -> None:
        self._raw = query_string
        self._values: dict[str, list[str]] = parse_qs(
            query_string.decode("latin-1"), keep_blank_values=True
        )

    def __getitem__(self, key: str) -> str:
        return self._values[key][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"QueryParams({self._raw.decode('latin-1')!r})"

    @property
    def raw(self) -> bytes:
        """The query string as received."""
        return self._raw

    def get_list(self, key: str) -> list[str]:
        """Every value given for *key*, in order."""
        return list(self._values.get(key, ()))

    def get_single(self, key: str) -> str | None:
        """The value of *key* when it was given exactly once, else ``None``.

        ``?files=a&files=b`` is a list, not a string; callers that expect
        one scalar get ``None`` for it, as they do for a missing key.
        """
        values = self._values.get(key)
        if values is None or len(values) != 1:
            return None
        return values[0]
