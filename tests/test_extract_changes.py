import pytest

from webhook_archiver.tools.extract_changes import extract_added_files, group_by_directory


def test_extracts_in_commit_then_array_order():
    payload = {
        "commits": [
            {"added": ["docs/readme.md", "docs/intro.md"]},
            {"added": ["src/main.txt"], "removed": ["old.txt"]},
        ]
    }
    assert extract_added_files(payload) == ["docs/readme.md", "docs/intro.md", "src/main.txt"]


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"commits": []},
        {"commits": None},
        {"commits": "not-a-list"},
        {"commits": [{}]},
        {"commits": [{"added": None}]},
        {"commits": [42, "x", None]},
        [],
        None,
        "text",
    ],
)
def test_malformed_payloads_yield_no_changes(payload):
    assert extract_added_files(payload) == []


def test_non_string_entries_are_dropped():
    payload = {"commits": [{"added": ["a.txt", 1, None, {"p": "q"}, "b/c.txt"]}, {"added": {"x": 1}}]}
    assert extract_added_files(payload) == ["a.txt", "b/c.txt"]


def test_group_by_parent_directory():
    groups = group_by_directory(
        ["docs/readme.md", "src/main.txt", "docs/intro.md", "docs/api/v1.md", "top.txt"],
        "/srv/repo",
    )
    assert groups == {
        "docs": ["/srv/repo/docs/readme.md", "/srv/repo/docs/intro.md"],
        "src": ["/srv/repo/src/main.txt"],
        "docs/api": ["/srv/repo/docs/api/v1.md"],
        "": ["/srv/repo/top.txt"],
    }


def test_group_is_deterministic():
    changes = ["b/1", "a/2", "b/3", "c/4"]
    first = group_by_directory(changes, "./repo")
    second = group_by_directory(changes, "./repo")
    assert first == second
    assert list(first) == list(second)
    assert first["b"] == ["./repo/b/1", "./repo/b/3"]


def test_group_empty_changes():
    assert group_by_directory([], "/srv/repo") == {}
