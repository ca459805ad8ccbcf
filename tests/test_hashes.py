"""
Tests for mapping merge helpers.
"""

from rubysugar.containers.hashes import Hash, clear, delete, merge, merged


class TestMerge:
    """Non-destructive merge."""

    def test_disjoint_union(self):
        assert merge({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}
        assert merge({"b": 2}, {"a": 1}) == merge({"a": 1}, {"b": 2})

    def test_other_wins_without_resolver(self):
        h1 = {"a": 100, "b": 200}
        h2 = {"b": 254, "c": 300}
        assert merge(h1, h2) == {"a": 100, "b": 254, "c": 300}

    def test_resolver_decides_conflicts(self):
        h1 = {"a": 100, "b": 200}
        h2 = {"b": 254, "c": 300}
        result = merge(h1, h2, lambda key, old, new: new - old)
        assert result == {"a": 100, "b": 54, "c": 300}

    def test_resolver_receives_key_and_values(self):
        calls = []

        def resolver(key, old, new):
            calls.append((key, old, new))
            return old

        merge({"k": 1, "x": 0}, {"k": 2, "y": 0}, resolver)
        assert calls == [("k", 1, 2)]

    def test_resolver_called_for_none_values(self):
        result = merge({"k": None}, {"k": 1}, lambda key, old, new: "resolved")
        assert result == {"k": "resolved"}

    def test_inputs_unchanged(self):
        h1 = {"a": 1}
        h2 = {"a": 2}
        merge(h1, h2)
        assert h1 == {"a": 1}
        assert h2 == {"a": 2}

    def test_empty(self):
        assert merge({}, {}) == {}

    def test_logs_conflicts(self, log_messages):
        merge({"a": 1}, {"a": 2}, lambda key, old, new: old + new)
        assert any("resolved 1 duplicate" in str(message) for message in log_messages)


class TestMerged:
    """In-place merge."""

    def test_mutates_and_returns_receiver(self):
        h1 = {"a": 100, "b": 200}
        result = merged(h1, {"b": 254, "c": 300})
        assert result is h1
        assert h1 == {"a": 100, "b": 254, "c": 300}

    def test_with_resolver(self):
        h1 = {"a": 1}
        merged(h1, {"a": 2}, lambda key, old, new: max(old, new) * 10)
        assert h1 == {"a": 20}


class TestClearAndDelete:
    """Clearing and deleting entries."""

    def test_clear(self):
        h = {"a": 1}
        assert clear(h) is h
        assert h == {}

    def test_delete_present(self):
        h = {"a": 1, "b": 2}
        assert delete(h, "a") == 1
        assert h == {"b": 2}

    def test_delete_missing(self):
        h = {"a": 1}
        assert delete(h, "z") is None
        assert h == {"a": 1}


class TestHash:
    """Dict wrapper."""

    def test_merge_returns_hash(self):
        h = Hash(a=1)
        result = h.merge({"a": 2, "b": 3})
        assert isinstance(result, Hash)
        assert result == {"a": 2, "b": 3}
        assert h == {"a": 1}

    def test_merged_in_place(self):
        h = Hash(a=1)
        assert h.merged({"a": 5}, lambda key, old, new: old + new) is h
        assert h == {"a": 6}

    def test_clear_returns_self(self):
        h = Hash(a=1)
        assert h.clear() is h
        assert len(h) == 0

    def test_delete(self):
        h = Hash(a=1)
        assert h.delete("a") == 1
        assert h.delete("a") is None
