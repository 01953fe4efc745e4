import io

from cubestructs.bst_demo import main, run_demo


def _demo_lines():
    out = io.StringIO()
    run_demo(out)
    return out.getvalue().splitlines()


def test_reports_empty_then_filled():
    lines = _demo_lines()
    assert lines[0] == "Dictionary empty at the beginning? true"
    assert "Dictionary empty after insertions? false" in lines


def test_find_inserted_key():
    assert "t.find(51): fifty one" in _demo_lines()


def test_removals_return_data():
    lines = _demo_lines()
    assert "t.remove(11): eleven (zero child remove)" in lines
    assert "t.remove(51): fifty one (one child remove)" in lines
    assert "t.remove(19): nineteen (two child remove)" in lines


def test_in_order_listing_before_and_after_removals():
    lines = _demo_lines()
    first = lines[lines.index("Current tree contents in order:") + 1]
    assert first.count("[") == 8
    assert "[11 : eleven]" in first
    last_header = len(lines) - 1 - lines[::-1].index("Current tree contents in order:")
    second = lines[last_header + 1]
    assert second.count("[") == 5
    for removed in ("[11 :", "[51 :", "[19 :"):
        assert removed not in second


def test_missing_key_messages():
    lines = _demo_lines()
    assert "Caught exception with error message: error: key not found" in lines
    assert (
        "Caught exception with error message: "
        "error: remove() used on non-existent key"
    ) in lines


def test_main_prints_and_exits_normally(capsys):
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert captured.rstrip().endswith("Exiting program normally.")