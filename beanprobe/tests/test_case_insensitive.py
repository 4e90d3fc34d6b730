from beanprobe.case_insensitive import CaseInsensitiveDict


def test_lookup_ignores_case() -> None:
    data = CaseInsensitiveDict({"UserName": "ann"})

    assert data["username"] == "ann"
    assert data["USERNAME"] == "ann"
    assert "userNAME" in data
    assert data.get("missing") is None


def test_latest_spelling_wins() -> None:
    data = CaseInsensitiveDict({"Key": 1})
    data["KEY"] = 2

    assert len(data) == 1
    assert list(data) == ["KEY"]
    assert data["key"] == 2


def test_source_mapping_is_copied() -> None:
    source = {"a": 1}
    data = CaseInsensitiveDict(source)
    data["b"] = 2

    assert "b" not in source


def test_non_string_keys_and_equality() -> None:
    data = CaseInsensitiveDict({1: "one", "Two": 2})

    assert data[1] == "one"
    assert data == {"two": 2, 1: "one"}
    del data["TWO"]
    assert dict(data) == {1: "one"}
    assert data.copy() == data
