from properties_reader.merger import Merger


def test_merge_two_documents():
    """Test basic document merging with override"""
    base = {"a": 1, "b": 2}
    override = {"b": 3, "c": 4}

    result = Merger.merge(base, override)

    assert result == {"a": 1, "b": 3, "c": 4}


def test_merge_mutates_and_returns_accumulator():
    """Test merge updates the accumulator in place"""
    accumulator = {"a": 1}

    result = Merger.merge(accumulator, {"b": 2})

    assert result is accumulator
    assert accumulator == {"a": 1, "b": 2}


def test_merge_empty_addition_returns_accumulator():
    """Test merging an empty or missing addition is a no-op"""
    accumulator = {"a": 1}

    assert Merger.merge(accumulator, {}) is accumulator
    assert Merger.merge(accumulator, None) is accumulator
    assert accumulator == {"a": 1}


def test_merge_is_shallow():
    """Test colliding nested documents are replaced, not combined"""
    first = {"db": {"host": "localhost", "port": 5432}, "name": "app"}
    second = {"db": {"host": "prod.example.com"}}

    result = Merger.merge(first, second)

    assert result == {"db": {"host": "prod.example.com"}, "name": "app"}


def test_merge_all_three_documents():
    """Test three-level merge (defaults → environment → local)"""
    defaults = {"timeout": 30, "debug": False}
    environment = {"debug": True, "region": "eu"}
    local = {"user": "dev"}

    result = Merger.merge_all(defaults, environment, local)

    assert result == {
        "timeout": 30,
        "debug": True,  # Environment overrides defaults
        "region": "eu",
        "user": "dev",
    }


def test_merge_all_does_not_mutate_inputs():
    """Test merge_all starts from a fresh document"""
    original = {"a": 1}
    result = Merger.merge_all(original, {"a": 2})

    assert result == {"a": 2}
    assert original == {"a": 1}
    assert result is not original
