from markov_traffic.occurrences import OccurrenceTable


def test_observe_creates_and_increments():
    t = OccurrenceTable()
    t.observe(("a",), "b")
    t.observe(("a",), "b")
    t.observe(("a",), "c")
    assert t.get(("a",)) == {"b": 2, "c": 1}
    assert ("a",) in t
    assert len(t) == 1


def test_get_unknown_history():
    assert OccurrenceTable().get(("x",)) is None


def test_totals():
    t = OccurrenceTable()
    t.observe(("a", "b"), "c")
    t.observe(("a", "b"), "c")
    t.observe(("b", "c"), "a")
    assert t.total() == 3
    assert t.transitions() == 2
    assert sorted(t) == [("a", "b"), ("b", "c")]


def test_top_k_orders_by_count_then_first_seen():
    t = OccurrenceTable()
    for nxt in ["x", "y", "y", "z", "z", "w"]:
        t.observe(("h",), nxt)
    assert t.top_k(("h",), k=3) == [("y", 2), ("z", 2), ("x", 1)]
    assert t.top_k(("missing",)) == []


def test_copy_is_deep():
    t = OccurrenceTable()
    t.observe(("a",), "b")
    c = t.copy()
    c.observe(("a",), "b")
    c.observe(("b",), "a")
    assert t.get(("a",)) == {"b": 1}
    assert ("b",) not in t


def test_top_k_with_non_positive_k_is_empty():
    t = OccurrenceTable()
    t.observe(("h",), "x")
    t.observe(("h",), "y")
    assert t.top_k(("h",), k=0) == []
    assert t.top_k(("h",), k=-1) == []
