"""
Edge-record CSV reading and writing.

Most inputs are lines of the form ``from,to[,extra...]``; the reader turns
them into ``EdgeRecord`` tuples and the writer serialises them back, passing
extra fields through untouched.
"""

from __future__ import annotations

import csv
import io
import sys
from pathlib import Path
from typing import IO, Iterable, Iterator, NamedTuple, Sequence, Tuple, Union

from .graph import Graph
from .logger import get_logger

log = get_logger(__name__)

PathOrStream = Union[str, Path, IO[str]]


class EdgeRecordError(ValueError):
    """A record with fewer than two fields or a non-integer node id."""

    def __init__(self, message: str, line: int, record: Sequence[str] = ()) -> None:
        super().__init__(f"line {line}: {message}")
        self.line = line
        self.record = list(record)


class EdgeRecord(NamedTuple):
    u: int
    v: int
    extra: Tuple[str, ...] = ()


class EdgeRecordReader:
    """Iterate over ``EdgeRecord`` objects read from a text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self._reader = csv.reader(stream)

    def __iter__(self) -> Iterator[EdgeRecord]:
        return self

    def __next__(self) -> EdgeRecord:
        while True:
            record = next(self._reader)
            if record:
                return self._parse(record)

    def read(self) -> EdgeRecord:
        """Next record; raises ``EOFError`` at end of input."""
        try:
            return next(self)
        except StopIteration:
            raise EOFError("end of edge records") from None

    def _parse(self, record: Sequence[str]) -> EdgeRecord:
        line = self._reader.line_num
        if len(record) < 2:
            raise EdgeRecordError("not enough data in the record", line, record)
        try:
            u = int(record[0].strip())
            v = int(record[1].strip())
        except ValueError as e:
            raise EdgeRecordError(f"non-integer node id ({e})", line, record) from e
        return EdgeRecord(u, v, tuple(record[2:]))


class EdgeRecordWriter:
    """Write ``u,v[,extra...]`` lines. Must be flushed/closed by the caller (or used as a context manager)."""

    def __init__(self, stream: IO[str], close_stream: bool = False) -> None:
        self._stream = stream
        self._writer = csv.writer(stream, lineterminator="\n")
        self._close_stream = close_stream

    def write(self, u: int, v: int, extra: Iterable[str] = ()) -> None:
        self._writer.writerow([u, v, *extra])

    def flush(self) -> None:
        self._stream.flush()

    def close(self) -> None:
        self.flush()
        if self._close_stream:
            self._stream.close()

    def __enter__(self) -> "EdgeRecordWriter":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def open_writer(path: Union[str, Path]) -> EdgeRecordWriter:
    return EdgeRecordWriter(open(path, "w", encoding="utf-8", newline=""), close_stream=True)


def iter_records(source: PathOrStream) -> Iterator[EdgeRecord]:
    """Records from a path, ``"-"`` (stdin) or an open text stream."""
    if isinstance(source, (str, Path)):
        if str(source) == "-":
            yield from EdgeRecordReader(sys.stdin)
            return
        with open(source, "r", encoding="utf-8", newline="") as f:
            yield from EdgeRecordReader(f)
    else:
        yield from EdgeRecordReader(source)


def read_graph(source: PathOrStream, directed: bool = False) -> Graph:
    """
    Build a Graph from an edge-record file.

    With ``directed=True`` each record adds only the edge u -> v.
    """
    g = Graph()
    add = g.add_directed_edge if directed else g.add_edge
    count = 0
    for rec in iter_records(source):
        add(rec.u, rec.v)
        count += 1
    log.info("Read %d edge record(s): %d nodes", count, g.number_of_nodes())
    return g


def write_edges(target: Union[str, Path, IO[str]], edges: Iterable[Tuple[int, int]]) -> int:
    """Write plain ``u,v`` lines; returns the number written."""
    n = 0
    if isinstance(target, (str, Path)):
        with open_writer(target) as w:
            for u, v in edges:
                w.write(u, v)
                n += 1
    else:
        w = EdgeRecordWriter(target)
        for u, v in edges:
            w.write(u, v)
            n += 1
        w.flush()
    return n


def parse_edges(text: str) -> list:
    """Records from an in-memory CSV string (handy for tests and small inputs)."""
    return list(EdgeRecordReader(io.StringIO(text)))
