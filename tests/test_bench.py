from radixtrie.bench import random_keys, time_inserts


def test_random_keys_reproducible():
    assert random_keys(50, seed=7) == random_keys(50, seed=7)
    keys = random_keys(50, seed=7)
    assert len(keys) == 50
    assert all(-2**31 <= int(k) < 2**31 for k in keys)


def test_time_inserts_reports_every_container():
    timings = time_inserts(random_keys(500, seed=1))
    assert set(timings) == {"list", "radix trie", "dict", "sorted list"}
    assert all(t >= 0 for t in timings.values())
