from typing import Iterable, Protocol

from ..domain.models import DataState


class SearchGateway(Protocol):
    """Source of recipe search progress.

    ``search`` returns a lazy sequence of :class:`DataState` reports for one
    ``(page, query)`` pair.  Callers may stop iterating at any point; if the
    returned iterator has a ``close`` method it is called when the caller
    abandons the search.
    """

    def search(self, page: int, query: str) -> Iterable[DataState]: ...
