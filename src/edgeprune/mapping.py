"""
Autoincrement id index.

Maps arbitrary node ids onto 1, 2, 3, ... in first-seen order, persisted as
``{"Allocations": [-1, id1, id2, ...]}``. Slot 0 is a sentinel so allocated
ids start at 1.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Iterable, List, Literal, Tuple, Union

from .edgelist import EdgeRecordReader, open_writer
from .logger import get_logger

log = get_logger(__name__)

RemapAction = Literal["apply", "revert", "mkapply", "index"]


class IdMapping:
    def __init__(self, allocations: Iterable[int] = (-1,)) -> None:
        self.allocations: List[int] = list(allocations)
        if not self.allocations:
            self.allocations = [-1]
        self.index: Dict[int, int] = {
            original: given for given, original in enumerate(self.allocations) if given > 0
        }

    def node(self, node_id: int) -> Tuple[int, bool]:
        """Allocated id for ``node_id`` and whether it was already known. Allocates on a miss."""
        given = self.index.get(node_id)
        if given is not None:
            return given, True
        given = len(self.allocations)
        self.index[node_id] = given
        self.allocations.append(node_id)
        return given, False

    def allocation(self, given: int) -> Tuple[int, bool]:
        """Original id behind ``given``; ``(given, False)`` when it was never allocated."""
        if given <= 0 or given >= len(self.allocations):
            return given, False
        return self.allocations[given], True

    def remove(self, node_id: int) -> bool:
        """Forget ``node_id``; the last allocation moves into its slot."""
        given = self.index.pop(node_id, None)
        if given is None:
            return False
        last = self.allocations.pop()
        if given < len(self.allocations):
            self.allocations[given] = last
            self.index[last] = given
        return True

    def __len__(self) -> int:
        return len(self.allocations) - 1

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.index

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_json(self) -> str:
        return json.dumps({"Allocations": self.allocations})

    @classmethod
    def from_json(cls, raw: str) -> "IdMapping":
        data = json.loads(raw)
        if not isinstance(data, dict) or not isinstance(data.get("Allocations"), list):
            raise ValueError("index JSON must be an object with an 'Allocations' list")
        return cls(int(x) for x in data["Allocations"])

    @classmethod
    def load(cls, path: Union[str, Path]) -> "IdMapping":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_json(f.read())

    def save(self, path: Union[str, Path]) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_json())


def _output_path(prefix: str, file: Union[str, Path]) -> Path:
    p = Path(file)
    return p.with_name(prefix + p.name)


def remap_files(
    mapping: IdMapping,
    files: Iterable[Union[str, Path]],
    prefix: str = "mapped_",
    action: RemapAction = "apply",
) -> List[Path]:
    """
    Rewrite edge-record files through ``mapping``.

    apply / mkapply   : original ids -> allocated ids (allocating unseen ids)
    revert            : allocated ids -> original ids (unknown ids untouched)
    index             : only grow the mapping, write nothing

    Output files are written next to their input with ``prefix`` prepended
    to the file name. Returns the paths written.
    """
    if action not in ("apply", "revert", "mkapply", "index"):
        raise ValueError(f"Unknown remap action: {action}")

    written: List[Path] = []
    for file in files:
        with open(file, "r", encoding="utf-8", newline="") as src:
            reader = EdgeRecordReader(src)
            if action == "index":
                for rec in reader:
                    mapping.node(rec.u)
                    mapping.node(rec.v)
                continue

            out = _output_path(prefix, file)
            with open_writer(out) as w:
                for rec in reader:
                    if action == "revert":
                        a = _revert(mapping, file, rec.u)
                        b = _revert(mapping, file, rec.v)
                    else:
                        a = _apply(mapping, file, rec.u, quiet=action == "mkapply")
                        b = _apply(mapping, file, rec.v, quiet=action == "mkapply")
                    w.write(a, b, rec.extra)
            written.append(out)
    return written


def _apply(mapping: IdMapping, file, node_id: int, quiet: bool) -> int:
    given, existed = mapping.node(node_id)
    if not existed and not quiet:
        log.info("%s: node %d was not in index; allocated to %d", file, node_id, given)
    return given


def _revert(mapping: IdMapping, file, given: int) -> int:
    original, found = mapping.allocation(given)
    if not found:
        log.info("%s: node %d was not in index; kept as is", file, given)
    return original


def run_remap(
    action: RemapAction,
    index_path: Union[str, Path],
    files: Iterable[Union[str, Path]],
    prefix: str = "mapped_",
) -> IdMapping:
    """Load (or start) the index, remap ``files`` and write the index back."""
    if action in ("apply", "revert"):
        mapping = IdMapping.load(index_path)
    else:
        mapping = IdMapping()
    remap_files(mapping, files, prefix=prefix, action=action)
    tmp = f"{index_path}.part"
    mapping.save(tmp)
    os.replace(tmp, index_path)
    log.info("Index with %d allocation(s) written to %s", len(mapping), index_path)
    return mapping
