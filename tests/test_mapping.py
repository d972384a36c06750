import pytest

from edgeprune.edgelist import parse_edges
from edgeprune.mapping import IdMapping, remap_files, run_remap


def test_basic_add_lookup():
    index = IdMapping()
    add_nodes = [3, 5, 6, 1, 9]

    given = []
    for nid in add_nodes:
        alloc, existing = index.node(nid)
        assert not existing
        given.append(alloc)

    # autoincrement starting from 1
    assert given == [1, 2, 3, 4, 5]
    for nid, alloc in zip(add_nodes, given):
        assert index.allocation(alloc) == (nid, True)
        assert index.node(nid) == (alloc, True)
    assert len(index) == 5


def test_allocation_out_of_range():
    index = IdMapping()
    index.node(42)
    assert index.allocation(0) == (0, False)
    assert index.allocation(-3) == (-3, False)
    assert index.allocation(2) == (2, False)


def test_remove_keeps_reverse_index_consistent():
    index = IdMapping()
    for nid in (10, 20, 30):
        index.node(nid)

    assert index.remove(10) is True
    assert index.remove(10) is False
    assert 10 not in index
    # 30 moved into slot 1
    assert index.allocation(1) == (30, True)
    assert index.node(30) == (1, True)
    assert index.node(20) == (2, True)

    assert index.remove(20) is True
    assert index.allocations == [-1, 30]


def test_json_round_trip(tmp_path):
    index = IdMapping()
    for nid in (7, 3, 11):
        index.node(nid)
    assert index.to_json() == '{"Allocations": [-1, 7, 3, 11]}'

    path = tmp_path / "index.json"
    index.save(path)
    loaded = IdMapping.load(path)
    assert loaded.allocations == index.allocations
    assert loaded.node(3) == (2, True)


def test_bad_json_rejected():
    with pytest.raises(ValueError):
        IdMapping.from_json('{"nope": 1}')


def test_mkapply_then_revert(tmp_path):
    src = tmp_path / "a.csv"
    src.write_text("10,20,w\n20,30\n", encoding="utf-8")

    index = IdMapping()
    (mapped,) = remap_files(index, [src], prefix="mapped_", action="mkapply")
    assert mapped.name == "mapped_a.csv"
    assert mapped.read_text(encoding="utf-8") == "1,2,w\n2,3\n"

    (restored,) = remap_files(index, [mapped], prefix="orig_", action="revert")
    assert parse_edges(restored.read_text(encoding="utf-8")) == parse_edges(src.read_text(encoding="utf-8"))


def test_apply_allocates_unseen_ids(tmp_path):
    src = tmp_path / "b.csv"
    src.write_text("5,6\n", encoding="utf-8")
    index = IdMapping([-1, 6])
    remap_files(index, [src], action="apply")
    assert (tmp_path / "mapped_b.csv").read_text(encoding="utf-8") == "2,1\n"
    assert index.allocations == [-1, 6, 5]


def test_index_action_writes_no_files(tmp_path):
    src = tmp_path / "c.csv"
    src.write_text("4,8\n8,9\n", encoding="utf-8")
    index_path = tmp_path / "index.json"

    mapping = run_remap("index", index_path, [src])
    assert mapping.allocations == [-1, 4, 8, 9]
    assert IdMapping.load(index_path).allocations == [-1, 4, 8, 9]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["c.csv", "index.json"]


def test_unknown_action():
    with pytest.raises(ValueError):
        remap_files(IdMapping(), [], action="shuffle")
