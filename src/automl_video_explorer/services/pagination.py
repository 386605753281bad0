"""Lazy, restartable sequences over paged list results."""

from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

RecordT = TypeVar("RecordT")


class LazyRecordSequence(Generic[RecordT]):
    """A finite sequence of records fetched page by page on demand.

    Nothing is requested until the sequence is iterated. Each new iteration
    calls ``fetch`` again and therefore restarts from the first page; the
    records are never accumulated.

    Args:
        fetch: Callable returning an iterable of raw items. Paged remote
            iterables request their next page only when the previous one is
            exhausted.
        convert: Callable turning one raw item into a record.

    Example:
        >>> seq = LazyRecordSequence(lambda: [1, 2, 3], str)
        >>> list(seq)
        ['1', '2', '3']
    """

    def __init__(
        self,
        fetch: Callable[[], Iterable[Any]],
        convert: Callable[[Any], RecordT] | None = None,
    ) -> None:
        self._fetch = fetch
        self._convert = convert

    def __iter__(self) -> Iterator[RecordT]:
        for item in self._fetch():
            yield self._convert(item) if self._convert is not None else item

    def last(self, predicate: Callable[[RecordT], bool]) -> RecordT | None:
        """Return the last record matching ``predicate``.

        Every page is fetched, since a later page may hold a later match.
        """
        match = None
        for record in self:
            if predicate(record):
                match = record
        return match
