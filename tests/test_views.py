from radixtrie import RadixTrie, TrieEntry


def sample():
    trie = RadixTrie()
    trie.put("com.google.mail", 1)
    trie.put("org.foo.bar", 2)
    trie.put("com.google.plus", 1)
    trie.put("com", 0)
    return trie


def test_keys_snapshot_isolation():
    trie = sample()
    keys = trie.keys()
    trie.put("net.example", 5)
    assert "net.example" not in keys
    assert "net.example" in trie.keys()


def test_mutating_snapshot_does_not_touch_trie():
    trie = sample()
    keys = trie.keys()
    keys.add("bogus")
    values = trie.values()
    values.clear()
    assert "bogus" not in trie
    assert len(trie.values()) == 4


def test_values_keep_duplicates_in_walk_order():
    trie = sample()
    assert trie.values() == [0, 1, 1, 2]
    assert trie.contains_value(2)
    assert not trie.contains_value(3)


def test_walk_is_structural_order():
    trie = sample()
    assert trie.walk() == [
        ("com", 0),
        ("com.google.mail", 1),
        ("com.google.plus", 1),
        ("org.foo.bar", 2),
    ]
    assert list(trie) == [key for key, _ in trie.walk()]


def test_entries():
    trie = sample()
    entries = trie.items()
    assert len(entries) == len(trie) == 4
    assert all(isinstance(e, TrieEntry) for e in entries)
    assert {(e.key, e.value) for e in entries} == {
        ("com", 0),
        ("com.google.mail", 1),
        ("com.google.plus", 1),
        ("org.foo.bar", 2),
    }
    assert dict(entries) == dict(trie.walk())


def test_entry_set_value_writes_through():
    trie = sample()
    entry = next(e for e in trie.items() if e.key == "org.foo.bar")
    assert entry.set_value(20) == 2
    assert entry.value == 20
    assert trie.get("org.foo.bar") == 20
    assert len(trie) == 4


def test_entry_equality():
    trie = sample()
    a = next(e for e in trie.items() if e.key == "com")
    b = next(e for e in trie.items() if e.key == "com")
    assert a == b
    assert hash(a) == hash(b)
    key, value = a
    assert (key, value) == ("com", 0)


def test_empty_trie_views():
    trie = RadixTrie()
    assert trie.keys() == set()
    assert trie.values() == []
    assert trie.items() == set()
    assert trie.is_empty()
    assert trie == {}


def test_mapping_protocol():
    trie = RadixTrie()
    trie["b"] = 2
    trie.update({"a": 1})
    trie.put_all([("c", 3)])
    assert trie == {"a": 1, "b": 2, "c": 3}
    assert repr(trie) == "RadixTrie({'a': 1, 'b': 2, 'c': 3})"
    assert trie.node_count() == 3


def test_put_all_keeps_entries_before_failure():
    trie = RadixTrie()
    source = [("one", 1), ("", 2), ("three", 3)]
    try:
        trie.put_all(source)
    except ValueError:
        pass
    assert trie.keys() == {"one"}


def test_views_on_deep_chain():
    trie = RadixTrie()
    depth = 1500
    for i in range(1, depth + 1):
        trie.put("a" * i, i)
    assert len(trie.keys()) == depth
    assert trie.values() == list(range(1, depth + 1))
    assert len(trie.items()) == depth
    pairs = trie.walk()
    assert pairs[0] == ("a", 1)
    assert pairs[-1] == ("a" * depth, depth)


def test_walk_order_after_branching():
    trie = RadixTrie()
    for key in ["ab", "a", "abd", "abc", "b", "ac"]:
        trie.put(key, key)
    assert [k for k, _ in trie.walk()] == ["a", "ab", "abc", "abd", "ac", "b"]
