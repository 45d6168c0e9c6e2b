from pathlib import Path

from core import JDFolder, RenumberConfig, plan_renumber, sort_by_decimal, target_decimals


def _folder(name, decimal, remainder, order, parent="/root"):
    return JDFolder(path=Path(parent) / name, decimal=decimal, remainder=remainder, order=order)


def test_sort_is_stable_on_equal_decimals():
    folders = [
        _folder("10.05 E", 5, "E", 0),
        _folder("10.01 B", 1, "B", 1),
        _folder("10.1 A", 1, "A", 2),
    ]

    assert [f.remainder for f in sort_by_decimal(folders)] == ["B", "A", "E"]


def test_target_decimals():
    folders = [_folder("10.03 A", 3, "A", 0), _folder("10.08 B", 8, "B", 1)]
    assert target_decimals(folders, 0) == [3, 8]
    assert target_decimals(folders, 14) == [14, 15]


def test_prefix_change_keeps_decimals():
    folders = [_folder("10.03 A", 3, "A", 0), _folder("10.1 B", 1, "B", 1)]
    config = RenumberConfig(source_prefix="10", target_prefix="20")

    plan = plan_renumber(folders, config)

    assert [op.dst.name for op in plan.ops] == ["20.01 B", "20.03 A"]
    assert all(op.dst.parent == op.src.parent for op in plan.ops)


def test_renumber_defaults_to_source_prefix():
    folders = [_folder("20.10 C", 10, "C", 0), _folder("20.01 A", 1, "A", 1), _folder("20.02 B", 2, "B", 2)]
    config = RenumberConfig(source_prefix="20", start=14)

    plan = plan_renumber(folders, config)

    assert [op.dst.name for op in plan.ops] == ["20.14 A", "20.15 B", "20.16 C"]


def test_prefix_only_path_does_not_truncate_wide_decimals():
    folders = [_folder("10.123 Wide", 123, "Wide", 0)]
    config = RenumberConfig(source_prefix="10", target_prefix="20", digits=2)

    plan = plan_renumber(folders, config)

    assert plan.ops[0].dst.name == "20.123 Wide"


def test_plan_counts():
    folders = [_folder("20.14 X", 14, "X", 0), _folder("20.01 Y", 1, "Y", 1)]
    plan = plan_renumber(folders, RenumberConfig(source_prefix="20", start=14))

    # 20.01 Y -> 20.14 Y, 20.14 X -> 20.15 X
    assert plan.total_count == 2
    assert plan.skip_count == 0
    assert [op.is_same for op in plan.ops] == [False, False]
