import pytest

from edgeprune.edgelist import EdgeRecordError, parse_edges
from edgeprune.egonets import egonets_to_csv, read_egonet


def test_read_egonet_pairs(tmp_path):
    path = tmp_path / "0.egonet"
    path.write_text("7: 3 9\n\n3: 7\n12:\n", encoding="utf-8")
    assert list(read_egonet(path)) == [(7, 3), (7, 9), (3, 7)]


def test_egonets_are_remapped_in_first_seen_order(tmp_path):
    a = tmp_path / "a.egonet"
    b = tmp_path / "b.egonet"
    a.write_text("100: 50 70\n", encoding="utf-8")
    b.write_text("70: 100  20\n", encoding="utf-8")
    out = tmp_path / "edges.csv"

    pairs, mapping = egonets_to_csv([a, b], out)

    assert pairs == 4
    assert mapping.allocations == [-1, 100, 50, 70, 20]
    assert [(r.u, r.v) for r in parse_edges(out.read_text(encoding="utf-8"))] == [(1, 2), (1, 3), (3, 1), (3, 4)]


@pytest.mark.parametrize("text", ["5 6 7\n", "x: 1\n", "1: 2 y\n"])
def test_malformed_egonet_lines(tmp_path, text):
    path = tmp_path / "bad.egonet"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(EdgeRecordError):
        list(read_egonet(path))
