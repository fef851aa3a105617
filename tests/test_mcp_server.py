"""Tests for the MCP server tools."""

import pytest

from mcp_hashtool.server import hash_tool, verify_tool

FOO_SHA256 = "2c26b46b68ffc68ff99b453c1d30413413422d706483bfa0f98a5e886266e7ae"


class TestHashTool:
    """Test the hash MCP tool."""

    def test_returns_dict(self):
        assert hash_tool("foo") == {"algo": "sha256", "hash": FOO_SHA256}

    def test_error_becomes_value_error(self):
        """Tool errors surface as ValueError with the same message."""
        with pytest.raises(ValueError, match=r"not in \[md5, sha256\]"):
            hash_tool("foo", "sha1")

    def test_empty_data(self):
        with pytest.raises(ValueError, match="non-empty data argument"):
            hash_tool("")

    def test_unencodable_data(self):
        """A lone surrogate from a JSON client is a tool error."""
        with pytest.raises(ValueError, match="not valid UTF-8"):
            hash_tool("\ud800")


class TestVerifyTool:
    """Test the verify MCP tool."""

    def test_match(self):
        result = verify_tool("foo", FOO_SHA256)
        assert result["match"] is True

    def test_missing_expected(self):
        with pytest.raises(ValueError):
            verify_tool("foo", "")
