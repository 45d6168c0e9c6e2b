import pytest

from core import (
    RenumberConfig, ReportKind, renumber_directories,
    ConfigError, RenumberOverflowError, CollisionError, TraversalError,
)


def test_rename_with_new_prefix(tmp_path, make_dirs, dir_names):
    make_dirs(tmp_path, ["10.01 Projects", "10.02 Documents", "10.03 Archive"])

    result = renumber_directories(RenumberConfig(source_prefix="10", target_prefix="20", root=tmp_path))

    assert result.ok
    assert dir_names(tmp_path) == ["20.01 Projects", "20.02 Documents", "20.03 Archive"]


def test_renumber_with_same_prefix(tmp_path, make_dirs, dir_names):
    make_dirs(tmp_path, ["10.01 Projects", "10.02 Documents", "10.03 Archive"])

    renumber_directories(RenumberConfig(source_prefix="10", start=5, root=tmp_path))

    assert dir_names(tmp_path) == ["10.05 Projects", "10.06 Documents", "10.07 Archive"]


def test_renumber_with_gaps(tmp_path, make_dirs, dir_names):
    make_dirs(tmp_path, ["20.01 A", "20.02 B", "20.10 C"])

    renumber_directories(RenumberConfig(source_prefix="20", start=14, root=tmp_path))

    assert dir_names(tmp_path) == ["20.14 A", "20.15 B", "20.16 C"]


def test_renumber_overflow(tmp_path, make_dirs, dir_names):
    names = ["20.01 First", "20.02 Second", "20.03 Third"]
    make_dirs(tmp_path, names)

    with pytest.raises(RenumberOverflowError, match=r"xx\.99 \(last number would be 100\)"):
        renumber_directories(RenumberConfig(source_prefix="20", start=98, root=tmp_path))

    assert dir_names(tmp_path) == names


def test_four_digit_renumber_with_new_prefix(tmp_path, make_dirs, dir_names):
    make_dirs(tmp_path, ["20.0001 First", "20.0002 Second", "20.0003 Third"])

    renumber_directories(RenumberConfig(
        source_prefix="20", target_prefix="90", start=1, root=tmp_path, digits=4,
    ))

    assert dir_names(tmp_path) == ["90.0001 First", "90.0002 Second", "90.0003 Third"]


def test_already_numbered_folders_are_skipped(tmp_path, make_dirs, dir_names):
    names = ["20.14 X", "20.15 Y", "20.16 Z"]
    make_dirs(tmp_path, names)

    result = renumber_directories(RenumberConfig(source_prefix="20", start=14, root=tmp_path))

    assert [r.kind for r in result.records] == [ReportKind.SKIPPED] * 3
    assert dir_names(tmp_path) == names


def test_second_run_skips_everything(tmp_path, make_dirs, tree_snapshot):
    make_dirs(tmp_path, ["30.07 A", "30.03 B", "Other/30.20 C"])
    config = RenumberConfig(source_prefix="30", start=1, root=tmp_path)

    first = renumber_directories(config)
    after_first = tree_snapshot(tmp_path)
    second = renumber_directories(config)

    assert first.success_count == 3
    assert second.skipped_count == 3
    assert second.success_count == 0
    assert tree_snapshot(tmp_path) == after_first


def test_dry_run_reports_same_records_as_real_run(tmp_path, make_dirs, tree_snapshot):
    make_dirs(tmp_path, ["10.01 A", "10.02 B", "10.09 C"])
    before = tree_snapshot(tmp_path)

    preview = renumber_directories(RenumberConfig(source_prefix="10", start=2, root=tmp_path, dry_run=True))
    assert tree_snapshot(tmp_path) == before

    real = renumber_directories(RenumberConfig(source_prefix="10", start=2, root=tmp_path))

    assert [(r.src, r.dst) for r in preview.records] == [(r.src, r.dst) for r in real.records]
    assert [r.kind for r in preview.records] == [ReportKind.WOULD_RENAME] * 3
    assert [r.kind for r in real.records] == [ReportKind.RENAMED] * 3


def test_dry_run_matches_real_run_for_nested_folders(tmp_path, make_dirs, tree_snapshot):
    make_dirs(tmp_path, ["10.01 Parent/10.02 Child", "10.03 Sibling"])
    before = tree_snapshot(tmp_path)

    preview = renumber_directories(RenumberConfig(source_prefix="10", target_prefix="20", root=tmp_path, dry_run=True))
    assert tree_snapshot(tmp_path) == before

    real = renumber_directories(RenumberConfig(source_prefix="10", target_prefix="20", root=tmp_path))

    assert [(r.src, r.dst) for r in preview.records] == [(r.src, r.dst) for r in real.records]
    assert preview.records[1].src == tmp_path.resolve() / "20.01 Parent" / "10.02 Child"
    assert preview.records[1].dst == tmp_path.resolve() / "20.01 Parent" / "20.02 Child"


def test_remainders_are_preserved(tmp_path, make_dirs, dir_names):
    make_dirs(tmp_path, ["40.11 Q1  report (draft)", "40.03 notes.v2 final"])

    renumber_directories(RenumberConfig(source_prefix="40", start=1, root=tmp_path))

    assert dir_names(tmp_path) == ["40.01 notes.v2 final", "40.02 Q1  report (draft)"]


def test_non_matching_folders_are_untouched_and_not_counted(tmp_path, make_dirs, dir_names):
    make_dirs(tmp_path, ["20.01 A", "20.02 B", "20.03", "21.01 Other", "20.x1 Bad", "Plain"])

    # Three non-matching 20.* names would overflow 98..100 if they were counted
    result = renumber_directories(RenumberConfig(source_prefix="20", start=98, root=tmp_path))

    assert result.success_count == 2
    assert dir_names(tmp_path) == ["20.03", "20.98 A", "20.99 B", "20.x1 Bad", "21.01 Other", "Plain"]


def test_equal_decimals_keep_encounter_order(tmp_path, make_dirs, dir_names):
    make_dirs(tmp_path, ["50.1 Later", "50.01 Earlier", "50.00 Zero"])

    renumber_directories(RenumberConfig(source_prefix="50", start=10, root=tmp_path))

    assert dir_names(tmp_path) == ["50.10 Zero", "50.11 Earlier", "50.12 Later"]


def test_colliding_targets_abort_before_renaming(tmp_path, make_dirs, dir_names):
    names = ["10.01 Same", "10.1 Same"]
    make_dirs(tmp_path, names)

    with pytest.raises(CollisionError):
        renumber_directories(RenumberConfig(source_prefix="10", target_prefix="20", root=tmp_path))

    assert dir_names(tmp_path) == names


def test_invalid_digits_fail_before_walking(tmp_path):
    with pytest.raises(ConfigError):
        renumber_directories(RenumberConfig(source_prefix="10", target_prefix="20", root=tmp_path / "missing", digits=0))


def test_missing_root(tmp_path):
    with pytest.raises(TraversalError):
        renumber_directories(RenumberConfig(source_prefix="10", target_prefix="20", root=tmp_path / "missing"))


def test_no_matches_is_empty_success(tmp_path, make_dirs):
    make_dirs(tmp_path, ["Plain"])

    result = renumber_directories(RenumberConfig(source_prefix="10", start=1, root=tmp_path))

    assert result.ok
    assert result.records == []


def test_path_like_target_prefix_is_rejected(tmp_path, make_dirs, tree_snapshot):
    make_dirs(tmp_path, ["area/10.01 A"])
    before = tree_snapshot(tmp_path)

    with pytest.raises(ConfigError):
        renumber_directories(RenumberConfig(source_prefix="10", target_prefix="a/20", root=tmp_path))

    assert tree_snapshot(tmp_path) == before


def test_shift_onto_a_pending_folder_aborts(tmp_path, make_dirs, dir_names):
    names = ["20.01 A", "20.02 A"]
    make_dirs(tmp_path, names)

    with pytest.raises(CollisionError):
        renumber_directories(RenumberConfig(source_prefix="20", start=2, root=tmp_path))

    assert dir_names(tmp_path) == names


def test_shift_down_with_same_names(tmp_path, make_dirs, dir_names):
    make_dirs(tmp_path, ["20.02 A", "20.03 A"])

    result = renumber_directories(RenumberConfig(source_prefix="20", start=1, root=tmp_path))

    assert result.ok
    assert dir_names(tmp_path) == ["20.01 A", "20.02 A"]
