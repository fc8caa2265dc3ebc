"""Tests for the local file-system capability."""

import pytest

from deepcontext.analysis import LocalFileSystem
from deepcontext.analysis.filesystem import absolute_path, decode_content, join_path, parent_directory


class TestPathHelpers:
    """Test path helper functions."""

    def test_join_normalizes(self):
        """Joined paths are normalized."""
        assert join_path("/a/b", "../c/./d") == "/a/c/d"
        assert join_path("/a/b", "/abs") == "/abs"

    def test_parent_directory(self):
        """Parent of a file path is its directory."""
        assert parent_directory("/a/b/c.ts") == "/a/b"

    def test_absolute_path(self):
        """Relative paths are anchored at the given working directory."""
        assert absolute_path("src/app.ts", "/project") == "/project/src/app.ts"
        assert absolute_path("/x/../y.ts") == "/y.ts"


class TestDecodeContent:
    """Test decode_content."""

    def test_utf8(self):
        """UTF-8 content decodes directly."""
        assert decode_content("const greeting = 'héllo';".encode()) == "const greeting = 'héllo';"

    def test_non_utf8_is_detected(self):
        """Non UTF-8 bytes are decoded through encoding detection."""
        raw = ("// " + "résumé café naïve " * 20).encode("latin-1")

        decoded = decode_content(raw)

        assert decoded.startswith("// r")
        assert "caf" in decoded

    def test_empty(self):
        """Empty files decode to an empty string."""
        assert decode_content(b"") == ""


class TestLocalFileSystem:
    """Test LocalFileSystem operations."""

    @pytest.mark.asyncio
    async def test_read_text(self, tmp_path):
        """Files are read as text."""
        target = tmp_path / "page.tsx"
        target.write_text("export default function Page() {}")

        assert await LocalFileSystem().read_text(str(target)) == "export default function Page() {}"

    @pytest.mark.asyncio
    async def test_read_missing_raises(self, tmp_path):
        """Reading a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            await LocalFileSystem().read_text(str(tmp_path / "missing.ts"))

    @pytest.mark.asyncio
    async def test_exists_never_raises(self, tmp_path):
        """exists reports False instead of raising."""
        fs = LocalFileSystem()
        (tmp_path / "a.ts").write_text("")

        assert await fs.exists(str(tmp_path / "a.ts"))
        assert await fs.exists(str(tmp_path))
        assert not await fs.exists(str(tmp_path / "b.ts"))
        assert not await fs.exists(str(tmp_path / "a.ts" / "child"))
        assert not await fs.exists("bad\x00path")

    @pytest.mark.asyncio
    async def test_list_directory(self, tmp_path):
        """Entries report whether they are directories."""
        (tmp_path / "sub").mkdir()
        (tmp_path / "file.ts").write_text("")

        entries = await LocalFileSystem().list_directory(str(tmp_path))

        assert {(e.name, e.is_directory) for e in entries} == {("sub", True), ("file.ts", False)}
        assert await LocalFileSystem().is_directory(str(tmp_path / "sub"))
