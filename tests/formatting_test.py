from indexed_pq import HashIndex, IndexedMinHeap, format_buckets, format_heap, format_levels


def test_format_levels_empty():
    assert format_levels([]) == ""
    assert format_heap(IndexedMinHeap(3)) == ""


def test_format_levels_full_and_partial_levels():
    pairs = [(1, "a"), (2, "b"), (3, "c"), (4, "d")]
    assert format_levels(pairs) == "(1,a)\n(2,b) (3,c)\n(4,d)\n"
    assert format_levels(pairs[:3]) == "(1,a)\n(2,b) (3,c)\n"


def test_format_heap_scenario():
    pq = IndexedMinHeap(14)
    for k in [18, 27, 20, 34, 30, 24, 99, 45, 80, 65, 78, 98, 97]:
        pq.insert(k, 1)
    assert format_heap(pq) == (
        "(18,1)\n"
        "(27,1) (20,1)\n"
        "(34,1) (30,1) (24,1) (99,1)\n"
        "(45,1) (80,1) (65,1) (78,1) (98,1) (97,1)\n"
    )

    pq.delete_min()
    pq.remove(24)
    pq.increase_key(20, 100)
    pq.remove(98)
    pq.decrease_key(120, 119)
    assert format_heap(pq) == (
        "(1,1)\n"
        "(27,1) (78,1)\n"
        "(34,1) (30,1) (97,1) (99,1)\n"
        "(45,1) (80,1) (65,1)\n"
    )


def test_format_buckets():
    t = HashIndex(5)
    t.insert(1, "a")
    t.insert(8, "b")
    assert format_buckets(t) == (
        "Bucket 0: (empty)\n"
        "Bucket 1: 1 -> a\n"
        "Bucket 2: (empty)\n"
        "Bucket 3: 8 -> b\n"
        "Bucket 4: (empty)\n"
    )
