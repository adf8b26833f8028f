import pytest

import getoptish
from getoptish import const


def test_reexports():
    assert getoptish.parse(["cmd", "-v"], "v") == ([("v", None)], [])
    assert issubclass(getoptish.UnknownOption, getoptish.ParseError)


def test_ensure():
    getoptish.ensure((const.VERSION[0], const.VERSION[1], 0))

    with pytest.raises(RuntimeError):
        getoptish.ensure((const.VERSION[0] + 1, 0, 0))
