import re

from evault.storage.objects import ObjectStore
from evault.utils import make_storage_name, split_extension


class TestStorageName:
    """Collision-resistant storage names for uploaded files."""

    def test_report_card(self):
        name = make_storage_name("report card.pdf")
        assert " " not in name
        assert name.endswith(".pdf")
        assert re.fullmatch(r"\d+_[0-9a-f]{8}_report_card\.pdf", name)

    def test_same_name_twice_differs(self):
        now = 1_700_000_000.0
        first = make_storage_name("report card.pdf", now=now)
        second = make_storage_name("report card.pdf", now=now)
        assert first != second
        assert first.startswith("1700000000000_")

    def test_unsafe_characters(self):
        name = make_storage_name("../../etc/My File (1)!.TXT")
        assert name.endswith("_my_file__1.txt")
        assert "/" not in name and ".." not in name
        assert name.endswith(".txt")
        assert ObjectStore.check_name(name) == name

    def test_no_extension(self):
        name = make_storage_name("Makefile")
        assert name.endswith("_makefile")
        assert "." not in name

    def test_empty_base(self):
        assert make_storage_name("").endswith("_file")
        assert make_storage_name("***.png").endswith("_file.png")

    def test_split_extension(self):
        assert split_extension("archive.tar.gz") == ("archive.tar", "gz")
        assert split_extension("README") == ("README", "")
        assert split_extension(".env") == (".env", "")
