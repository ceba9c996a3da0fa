"""Tests for the alias store: load/save policy, CRUD, sentinel handling, resolution."""

from __future__ import annotations

import json
import os
import stat

import pytest

from findcommit.errors import InvalidAliasError, MissingArgumentError, StorageReadError, StorageWriteError
from findcommit.models import AliasEntry
from findcommit.store import SENTINEL_KEY, AliasStore, validate_alias


# ---------------------------------------------------------------------------
# load / save
# ---------------------------------------------------------------------------


class TestLoadSave:
    def test_load_nonexistent_is_empty(self, store):
        assert store.load() == {}

    def test_load_blank_file_is_empty(self, store, store_path):
        store_path.write_text("  \n")
        assert store.load() == {}

    def test_save_and_load(self, store):
        store.save({"release": "abc123"})
        assert store.load() == {"release": "abc123"}

    def test_save_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "deep" / "nested" / "aliases.json"
        store = AliasStore(path)
        store.save({"a": "1"})
        assert path.exists()
        assert store.load() == {"a": "1"}

    def test_save_leaves_no_temp_files(self, store, store_path):
        store.save({"a": "1"})
        store.save({"b": "2"})
        assert [p.name for p in store_path.parent.iterdir()] == [store_path.name]

    def test_corrupt_json_raises(self, store, store_path):
        store_path.write_text("not valid json{{{")
        with pytest.raises(StorageReadError):
            store.load()

    def test_non_object_raises(self, store, store_path):
        store_path.write_text("[1, 2, 3]")
        with pytest.raises(StorageReadError):
            store.load()

    def test_non_string_values_raise(self, store, store_path):
        store_path.write_text(json.dumps({"a": 1}))
        with pytest.raises(StorageReadError):
            store.load()

    def test_corrupt_file_is_not_overwritten_by_set(self, store, store_path):
        store_path.write_text("not valid json{{{")
        with pytest.raises(StorageReadError):
            store.set("release", "abc123")
        assert store_path.read_text() == "not valid json{{{"

    def test_save_into_unwritable_location_raises(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        store = AliasStore(blocker / "aliases.json")
        with pytest.raises(StorageWriteError):
            store.save({"a": "1"})

    def test_failed_replace_keeps_previous_file(self, store, store_path, monkeypatch):
        store.set("release", "abc123")
        before = store_path.read_bytes()

        def fail_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("findcommit.store.os.replace", fail_replace)
        with pytest.raises(StorageWriteError):
            store.set("hotfix", "def456")
        assert store_path.read_bytes() == before
        assert not list(store_path.parent.glob("*.tmp"))

    @pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
    def test_save_keeps_existing_permissions(self, store, store_path):
        store.set("release", "abc123")
        os.chmod(store_path, 0o644)
        store.set("hotfix", "def456")
        assert stat.S_IMODE(store_path.stat().st_mode) == 0o644


# ---------------------------------------------------------------------------
# validation
# ---------------------------------------------------------------------------


class TestValidateAlias:
    @pytest.mark.parametrize("alias", ["release", "v1", "hot-fix", "hot_fix", "A-1_b", "9"])
    def test_accepts(self, alias):
        assert validate_alias(alias) == alias

    @pytest.mark.parametrize("alias", ["", "with space", "trailing\n", "dot.ted", "slash/ed", "emoji✓", "semi;colon"])
    def test_rejects(self, alias):
        with pytest.raises(InvalidAliasError):
            validate_alias(alias)

    def test_rejects_none(self):
        with pytest.raises(InvalidAliasError):
            validate_alias(None)

    def test_rejects_sentinel(self):
        with pytest.raises(InvalidAliasError):
            validate_alias(SENTINEL_KEY)


# ---------------------------------------------------------------------------
# set / get / delete / list
# ---------------------------------------------------------------------------


class TestOperations:
    def test_set_then_get(self, store):
        store.set("release", "abc123")
        assert store.get("release") == "abc123"

    def test_set_twice_keeps_latest(self, store):
        store.set("release", "abc123")
        store.set("release", "def456")
        assert store.get("release") == "def456"
        assert store.load() == {"release": "def456"}

    def test_set_keeps_other_entries(self, store):
        store.set("a", "111")
        store.set("b", "222")
        assert store.load() == {"a": "111", "b": "222"}

    def test_set_invalid_alias_does_not_write(self, store, store_path):
        with pytest.raises(InvalidAliasError):
            store.set("bad alias", "abc123")
        assert not store_path.exists()

    def test_set_empty_ref_raises(self, store, store_path):
        with pytest.raises(MissingArgumentError):
            store.set("release", "")
        assert not store_path.exists()

    def test_get_missing(self, store):
        assert store.get("nope") is None

    def test_delete_present(self, store):
        store.set("release", "abc123")
        assert store.delete("release") is True
        assert store.get("release") is None

    def test_delete_absent_leaves_file_unchanged(self, store, store_path):
        store.set("release", "abc123")
        before = store_path.read_text()
        assert store.delete("nope") is False
        assert store_path.read_text() == before

    def test_delete_absent_without_file(self, store, store_path):
        assert store.delete("nope") is False
        assert not store_path.exists()

    def test_list(self, store):
        store.set("b", "222")
        store.set("a", "111")
        entries = store.list()
        assert {(e.alias, e.commit_ref) for e in entries} == {("a", "111"), ("b", "222")}
        assert all(isinstance(e, AliasEntry) for e in entries)

    def test_list_empty(self, store):
        assert store.list() == []


# ---------------------------------------------------------------------------
# sentinel
# ---------------------------------------------------------------------------


class TestSentinel:
    @pytest.fixture
    def seeded(self, store, store_path):
        store_path.write_text(json.dumps({SENTINEL_KEY: "guard", "release": "abc123"}))
        return store

    def test_list_excludes_sentinel(self, seeded):
        assert [e.alias for e in seeded.list()] == ["release"]

    def test_list_only_sentinel_is_empty(self, store, store_path):
        store_path.write_text(json.dumps({SENTINEL_KEY: "guard"}))
        assert store.list() == []

    def test_get_hides_sentinel(self, seeded):
        assert seeded.get(SENTINEL_KEY) is None

    def test_delete_refuses_sentinel(self, seeded):
        assert seeded.delete(SENTINEL_KEY) is False
        assert SENTINEL_KEY in seeded.load()

    def test_sentinel_survives_set(self, seeded):
        seeded.set("other", "def456")
        assert seeded.load()[SENTINEL_KEY] == "guard"

    def test_resolving_sentinel_is_raw_input(self, seeded):
        query = seeded.resolve(SENTINEL_KEY)
        assert query.is_alias is False
        assert query.commit_ref == SENTINEL_KEY


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


class TestResolve:
    def test_alias(self, store):
        store.set("release", "abc123")
        query = store.resolve("release")
        assert query.is_alias is True
        assert query.alias_name == "release"
        assert query.commit_ref == "abc123"

    def test_raw_sha(self, store):
        store.set("release", "abc123")
        query = store.resolve("abc123")
        assert query.is_alias is False
        assert query.alias_name is None
        assert query.commit_ref == "abc123"

    def test_raw_sha_without_store_file(self, store):
        query = store.resolve("88990a")
        assert query.is_alias is False
        assert query.commit_ref == "88990a"
