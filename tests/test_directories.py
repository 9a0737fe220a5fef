import pytest

from core.directories import join_under, prepare_mods_dir, remove_tree
from model_types import ModDescriptor


def test_no_mods_deletes_whole_tree(tmp_path, logger):
    mods_dir = tmp_path / "FactoryGame" / "Mods"
    (mods_dir / "SomeMod").mkdir(parents=True)
    (mods_dir / "SomeMod" / "dummy.txt").write_text("x")

    assert prepare_mods_dir(mods_dir, (), logger) is False
    assert not mods_dir.exists()
    assert "No Mod IDs given" in logger.text()


def test_no_mods_with_absent_tree_is_not_an_error(tmp_path):
    mods_dir = tmp_path / "missing"
    assert prepare_mods_dir(mods_dir, ()) is False
    assert remove_tree(mods_dir) is False


def test_creates_missing_parents(tmp_path):
    mods_dir = tmp_path / "a" / "b" / "Mods"
    assert prepare_mods_dir(mods_dir, [ModDescriptor("abc", "1.0")]) is True
    assert mods_dir.is_dir()


def test_existing_directory_is_not_wiped(tmp_path):
    mods_dir = tmp_path / "Mods"
    mods_dir.mkdir()
    (mods_dir / "keep.txt").write_text("keep")

    prepare_mods_dir(mods_dir, [ModDescriptor("abc", "1.0")])
    assert (mods_dir / "keep.txt").read_text() == "keep"


def test_creation_failure_propagates(tmp_path):
    blocker = tmp_path / "Mods"
    blocker.write_text("not a directory")
    with pytest.raises(OSError):
        prepare_mods_dir(blocker, [ModDescriptor("abc", "1.0")])


def test_join_under_keeps_absolute_names_below_root(tmp_path):
    assert join_under(tmp_path, "/srv/x") == tmp_path / "srv" / "x"
    assert join_under(tmp_path, "plain") == tmp_path / "plain"
