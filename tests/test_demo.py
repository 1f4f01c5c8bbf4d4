import io

import pytest

from bintree.demo import main, run_example
from bintree.display import render


def _output(number):
    buffer = io.StringIO()
    run_example(number, buffer)
    return buffer.getvalue()


def _tail(number, count):
    return _output(number).splitlines()[-count:]


def _measures(number):
    return [int(line.rsplit(":", 1)[1]) for line in _tail(number, 3)]


def test_example_0_draws_seven_nodes():
    text = _output(0)
    assert text.count("____") == 7
    assert text.count("L--") == 3
    assert text.count("R--") == 3


def test_example_1_draws_tree_before_and_after_inserts():
    text = _output(1)
    assert text.count("(098)") == 2
    assert text.count("(128)") == 1
    assert text.count("(054)") == 1
    assert text.count("____") == 3 + 5


def test_example_2_draws_tree_before_and_after_inserts():
    text = _output(2)
    assert text.count("(402)") == 2
    assert text.count("(054)") == 1
    assert text.count("____") == 3 + 5


def test_example_3_prints_the_tree_once():
    text = _output(3)
    assert text.count("____") == 5
    assert text.count("(098)") == 1


def test_traversal_examples_visit_the_same_values():
    values = [sorted(_tail(number, 7)) for number in (6, 7, 8)]
    assert values[0] == values[1] == values[2]


def test_inorder_example_is_sorted():
    numbers = [int(line) for line in _tail(7, 7)]
    assert numbers == sorted(numbers)


def test_preorder_starts_and_postorder_ends_at_root():
    assert _tail(6, 7)[0] == "98"
    assert _tail(8, 7)[-1] == "98"


def test_leaf_and_root_examples_report_flags():
    leaf_lines = _tail(4, 3)
    root_lines = _tail(5, 3)
    assert leaf_lines[0].startswith("Is 98 a leaf:")
    assert [line[-1] for line in root_lines] == ["1", "0", "0"]
    assert leaf_lines[0][-1] == "0"


def test_height_decreases_down_the_tree():
    root_height, right_height, leaf_height = _measures(9)
    assert root_height > right_height > leaf_height
    assert leaf_height == 0


def test_depth_increases_down_the_tree():
    root_depth, right_depth, deep_depth = _measures(10)
    assert root_depth == 0
    assert root_depth < right_depth < deep_depth


def test_sizes_and_counts_are_consistent():
    sizes = _measures(11)
    leaves = _measures(12)
    internal = _measures(13)
    for size, leaf_count, inner_count in zip(sizes, leaves, internal):
        assert size == leaf_count + inner_count
    assert sizes[2] == 1


def test_balance_example_prints_signed_values():
    lines = _tail(14, 3)
    assert all(line.rsplit(": ", 1)[1][0] in "+-" for line in lines)
    assert lines[0].startswith("Balance of 98:")


def test_full_example_reports_three_lines():
    lines = _tail(15, 3)
    assert [line.split(" full:")[0] for line in lines] == [
        "Is 98", "Is 12", "Is 128",
    ]


def test_sibling_of_root_is_null():
    assert _tail(17, 1) == ["Sibling of 98: (nil)"]


def test_uncle_of_child_of_root_is_null():
    lines = _tail(18, 3)
    assert lines[2].endswith("(nil)")
    assert lines[2].startswith("Uncle of 12:")


def test_unknown_example_raises():
    with pytest.raises(ValueError):
        run_example(19, io.StringIO())


def test_main_runs_one_example(capsys):
    assert main(["9"]) == 0
    assert capsys.readouterr().out == _output(9)


def test_main_runs_all_examples_by_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "".join(_output(number) for number in range(19))


def test_main_rejects_unknown_example(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["42"])
    assert excinfo.value.code == 2


def test_example_output_begins_with_tree_drawing():
    text = _output(12)
    drawing = text[: text.index("Leaves in")]
    assert drawing.count("____") == 5
    assert render(None) == ""