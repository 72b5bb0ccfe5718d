"""Tests for the Claude config (active store) adapter."""

import json
import logging

import pytest

from mcp_helperton.core.exceptions import AtomicWriteError, StoreReadError
from mcp_helperton.services.active_store import ActiveStore


class TestActiveStore:
    """Test ActiveStore functionality."""

    @pytest.fixture
    def store(self, active_path):
        """Create an active store on a temp path."""
        return ActiveStore(active_path)

    def test_init(self, store, active_path):
        """Test paths derived at construction."""
        assert store.config_file == active_path
        assert store.backup_file == active_path.parent / ".claude.json.helperton-backup"

    def test_default_path(self, fake_home):
        """Test that the default store is the dotfile in the home directory."""
        assert ActiveStore().config_file == fake_home / ".claude.json"

    def test_read_missing_file(self, store):
        """Test reading when the config does not exist."""
        assert store.read() == {}

    def test_read_without_servers_key(self, store, active_path, write_json):
        """Test reading a config with no mcpServers field."""
        write_json(active_path, {"numStartups": 3})
        assert store.read() == {}

    def test_read_null_servers(self, store, active_path, write_json):
        write_json(active_path, {"mcpServers": None})
        assert store.read() == {}

    def test_read_servers(self, store, active_path, write_json):
        """Test reading the enabled servers."""
        servers = {"context7": {"type": "stdio", "command": "npx", "args": ["-y", "@upstash/context7-mcp"]}}
        write_json(active_path, {"mcpServers": servers, "projects": {}})
        assert store.read() == servers

    def test_read_invalid_json(self, store, active_path):
        """Test that malformed JSON is reported, not swallowed."""
        active_path.parent.mkdir(parents=True)
        active_path.write_text("{invalid json}")

        with pytest.raises(StoreReadError, match="Failed to read Claude config"):
            store.read()

    def test_read_non_object(self, store, active_path, write_json):
        """Test that a JSON array is rejected."""
        write_json(active_path, ["not", "an", "object"])
        with pytest.raises(StoreReadError, match="must contain a JSON object"):
            store.read()

    def test_read_full(self, store, active_path, write_json):
        """Test reading the whole document."""
        assert store.read_full() == {"mcpServers": {}}

        write_json(active_path, {"mcpServers": {"a": {}}, "theme": "dark"})
        assert store.read_full() == {"mcpServers": {"a": {}}, "theme": "dark"}

    def test_write_preserves_unknown_fields(self, store, active_path, write_json, read_json):
        """Test that fields other than mcpServers pass through."""
        write_json(active_path, {
            "foo": "bar",
            "mcpServers": {"old": {"command": "old"}},
            "projects": {"/tmp/project": {"mcpServers": {"local": {}}}},
        })

        store.write({"new": {"command": "new"}})

        document = read_json(active_path)
        assert document["foo"] == "bar"
        assert document["projects"] == {"/tmp/project": {"mcpServers": {"local": {}}}}
        assert document["mcpServers"] == {"new": {"command": "new"}}
        assert list(document) == ["foo", "mcpServers", "projects"]

    def test_write_pretty_prints(self, store, active_path):
        """Test that the config is written with two-space indentation."""
        store.write({"a": {"command": "x"}})
        assert active_path.read_text() == json.dumps({"mcpServers": {"a": {"command": "x"}}}, indent=2)

    def test_write_creates_directory(self, store, active_path, read_json):
        """Test writing when the parent directory is missing."""
        store.write({"a": {}})
        assert read_json(active_path) == {"mcpServers": {"a": {}}}

    def test_backup_created_once(self, store, active_path, write_json):
        """Test that the first write keeps a byte-exact copy of the config."""
        write_json(active_path, {"mcpServers": {"a": {}}, "userID": "abc"})
        original = active_path.read_bytes()

        store.write({})
        assert store.backup_file.read_bytes() == original

        store.write({"b": {}})
        assert store.backup_file.read_bytes() == original

    def test_existing_backup_not_overwritten(self, store, active_path, write_json):
        """Test that an older backup is never replaced."""
        write_json(active_path, {"mcpServers": {}})
        store.backup_file.write_text("previous backup")

        store.write({"a": {}})
        assert store.backup_file.read_text() == "previous backup"

    def test_no_backup_without_config(self, store):
        """Test that nothing is backed up when there was no config yet."""
        store.write({"a": {}})
        assert not store.backup_file.exists()

    def test_write_over_corrupt_config(self, store, active_path, read_json, caplog):
        """Test that an unreadable config is replaced instead of failing the write."""
        active_path.parent.mkdir(parents=True)
        active_path.write_text("{not json")

        with caplog.at_level(logging.WARNING, logger="mcp_helperton.services.active_store"):
            store.write({"a": {"command": "x"}})

        assert read_json(active_path) == {"mcpServers": {"a": {"command": "x"}}}
        assert store.backup_file.read_text() == "{not json"
        assert "Ignoring unreadable" in caplog.text

    def test_add_server(self, store, read_json, active_path):
        """Test adding a server."""
        store.add_server("test_http", {"type": "http", "url": "https://test.example.com"})
        store.add_server("test_http", {"type": "http", "url": "https://new.example.com"})

        assert read_json(active_path)["mcpServers"] == {
            "test_http": {"type": "http", "url": "https://new.example.com"}
        }

    def test_remove_server(self, store):
        """Test removing a server returns its config."""
        store.add_server("server1", {"command": "cmd1"})
        store.add_server("server2", {"command": "cmd2"})

        assert store.remove_server("server1") == {"command": "cmd1"}
        assert store.read() == {"server2": {"command": "cmd2"}}

    def test_remove_nonexistent_server(self, store):
        """Test removing a server that does not exist."""
        assert store.remove_server("nonexistent") is None
        assert not store.config_file.exists()

    def test_read_undecodable_bytes(self, store, active_path):
        """Test that a config that is not UTF-8 is reported as a read error."""
        active_path.parent.mkdir(parents=True)
        active_path.write_bytes(b'{"mcpServers": {"\xff": {}}}')

        with pytest.raises(StoreReadError, match="Failed to read Claude config"):
            store.read()

    @pytest.mark.parametrize("servers", [["a"], "a", 3])
    def test_read_non_object_servers(self, store, active_path, write_json, servers):
        """Test that mcpServers must be a JSON object when present."""
        write_json(active_path, {"mcpServers": servers})
        with pytest.raises(StoreReadError, match="mcpServers .* must be a JSON object"):
            store.read()

    def test_write_over_undecodable_config(self, store, active_path, read_json, caplog):
        """Test that a config with invalid UTF-8 is replaced, after a byte-exact backup."""
        active_path.parent.mkdir(parents=True)
        active_path.write_bytes(b'{"mcpServers": {"\xff": {}}}')

        with caplog.at_level(logging.WARNING, logger="mcp_helperton.services.active_store"):
            store.write({"a": {}})

        assert read_json(active_path) == {"mcpServers": {"a": {}}}
        assert store.backup_file.read_bytes() == b'{"mcpServers": {"\xff": {}}}'
        assert "Ignoring unreadable" in caplog.text

    def test_write_when_directory_cannot_be_created(self, tmp_path):
        """Test that a failed mkdir is wrapped with the target path."""
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        store = ActiveStore(blocker / "sub" / ".claude.json")

        with pytest.raises(AtomicWriteError) as exc_info:
            store.write({"a": {}})

        assert exc_info.value.path == store.config_file
        assert isinstance(exc_info.value.cause, OSError)
        assert str(store.config_file) in str(exc_info.value)
