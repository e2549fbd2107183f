import pytest

from bagsort.bag import LinkedBag
from bagsort.demo import format_bag, main


def test_format_bag_trailing_spaces():
    assert format_bag(LinkedBag([1, 2])) == "2 1 "


def test_format_empty_bag():
    assert format_bag(LinkedBag()) == ""


@pytest.mark.parametrize("argv", [[], ["merge"], ["quick"]])
def test_main_output(argv, capsys):
    assert main(argv) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Original bag elements"
    assert lines[2] == "Sorted bag elements"
    original = [int(x) for x in lines[1].split()]
    result = [int(x) for x in lines[3].split()]
    assert original == [7, 40, 24, 15, 62, 35]
    assert result == sorted(original)
    assert lines[3].endswith(" ")


def test_main_rejects_unknown_method(capsys):
    with pytest.raises(SystemExit) as info:
        main(["bubble"])
    assert info.value.code == 2