"""Transit API port."""

from typing import Any, Protocol

QueryValue = str | int | float | bool
QueryParams = dict[str, QueryValue | None]


class TransitApi(Protocol):
    """Port for issuing GET requests against the upstream transit API."""

    async def get(self, endpoint: str, params: QueryParams | None = None) -> Any:
        """GET ``endpoint`` with ``params`` and return the decoded JSON body.

        ``None`` values in ``params`` are omitted from the query string.
        """
        ...
