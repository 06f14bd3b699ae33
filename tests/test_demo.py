from bstmap.demo import WORDS, lower_than_string, main


def test_lower_than_string():
    assert lower_than_string("casa", "case") is True
    assert lower_than_string("seco", "saco") is False
    assert lower_than_string("cosa", "cosa") is False


def test_main_prints_sorted(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == sorted(WORDS)
    assert lines[0] == "casa"