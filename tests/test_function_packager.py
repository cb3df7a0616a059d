"""Tests for the function packager."""

from src.application.services.function_packager import FunctionPackager
from src.domain.entities.function_fragment import FunctionFragment
from src.infrastructure.archive.zip_archive_builder import ZipArchiveBuilder
from tests.helpers import read_zip, sha256_hex


class TestPackage:
    def test_entry_path_is_digest_folder_and_name(self, digest):
        archive = ZipArchiveBuilder()
        fragment = FunctionFragment(text="function foo(){return 1;}", name="foo")

        entries = FunctionPackager(digest).package([fragment], archive)

        expected_path = f"{sha256_hex('foo')}/foo.js"
        assert [e.path for e in entries] == [expected_path]
        assert read_zip(archive.to_bytes()) == {expected_path: "function foo(){return 1;}"}

    def test_same_name_last_write_wins(self, digest):
        archive = ZipArchiveBuilder()
        first = FunctionFragment(text="function dup(){ return 1; }", name="dup")
        second = FunctionFragment(text="function dup(){ return 2; }", name="dup")

        FunctionPackager(digest).package([first, second], archive)

        assert read_zip(archive.to_bytes()) == {
            f"{sha256_hex('dup')}/dup.js": "function dup(){ return 2; }"
        }

    def test_unnamed_fragment_is_dropped(self, digest):
        archive = ZipArchiveBuilder()
        fragment = FunctionFragment(text="function (){}", name="")

        assert FunctionPackager(digest).package([fragment], archive) == []
        assert archive.names() == []
