from getoptish import utils


def test_levenshtein():
    assert utils.levenshtein("", "") == 0
    assert utils.levenshtein("abc", "") == 3
    assert utils.levenshtein("", "abc") == 3
    assert utils.levenshtein("kitten", "sitting") == 3
    assert utils.levenshtein("sitting", "kitten") == 3
    assert utils.levenshtein("colors", "colors") == 0
    assert utils.levenshtein("conf=", "conf") == 1


def test_most_similar():
    scored = [(3, "--c"), (1, "--a"), (2, "--b"), (1, "--d")]
    assert utils.mostSimilar(scored, 5) == ["--a", "--d", "--b", "--c"]
    assert utils.mostSimilar(scored, 2) == ["--a", "--d"]
    assert utils.mostSimilar([], 5) == []
