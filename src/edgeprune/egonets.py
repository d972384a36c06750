"""
Egonet adjacency files -> one edge-list CSV.

Input lines look like ``node: n1 n2 n3``. Every ``node, ni`` pair becomes an
edge record, with ids remapped through an ``IdMapping`` so the output uses
1, 2, 3, ... in first-seen order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from .edgelist import EdgeRecordError, open_writer
from .logger import get_logger
from .mapping import IdMapping

log = get_logger(__name__)


def _to_int(token: str, line: int) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise EdgeRecordError(f"non-integer node id {token!r}", line, [token]) from e


def read_egonet(path: Union[str, Path]) -> Iterator[Tuple[int, int]]:
    """Yield ``(node, neighbour)`` pairs from one egonet file. Blank lines are skipped."""
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            head, sep, rest = line.partition(":")
            if not sep:
                raise EdgeRecordError("missing ':' after the node id", line_no, [line.rstrip("\n")])
            node = _to_int(head.strip(", "), line_no)
            for token in rest.split():
                yield node, _to_int(token, line_no)


def egonets_to_csv(
    files: Iterable[Union[str, Path]],
    output: Union[str, Path],
    mapping: Optional[IdMapping] = None,
) -> Tuple[int, IdMapping]:
    """
    Convert egonet files into a single remapped ``u,v`` edge list.

    Returns the number of pairs written and the mapping used (a fresh one
    unless ``mapping`` is given).
    """
    mapping = mapping if mapping is not None else IdMapping()
    pairs = 0
    with open_writer(output) as w:
        for file in files:
            for a, b in read_egonet(file):
                u, _ = mapping.node(a)
                v, _ = mapping.node(b)
                w.write(u, v)
                pairs += 1
            log.debug("Converted egonet file %s", file)

    log.info("Wrote %d pairs. Last node id allocated: %d (starting at 1).", pairs, len(mapping))
    return pairs, mapping
