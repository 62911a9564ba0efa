"""
Parameters attached to a single include.
"""

from typing import Any, Iterator, Mapping, Optional


class ParamBag(Mapping[str, Any]):
    """
    Read-only mapping of include parameters.

    A parameter given one value holds a string, one given several
    (``limit(5|2)``) holds the list of strings.

    Example:
        ```python
        params = ParamBag({"limit": "5", "sort": "-created_at"})
        params.get("limit")  # "5"
        ```
    """

    def __init__(self, params: Optional[Mapping[str, Any]] = None):
        self._params = dict(params or {})

    def __getitem__(self, key: str) -> Any:
        return self._params[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return f"ParamBag({self._params!r})"
