from getoptish.scan import ArgScan


def test_scan_next():
    s = ArgScan(["a", "b"])
    assert s.curr() == "a"
    assert s.next() == "a"
    assert s.next() == "b"
    assert s.eof()
    assert s.next() is None
    assert s.curr() is None


def test_scan_rest():
    s = ArgScan(["a", "b", "c"], 1)
    assert s.rest() == ["b", "c"]
    assert s.eof()
    assert s.rest() == []


def test_scan_copies_args():
    args = ["a"]
    s = ArgScan(args)
    args.append("b")
    assert s.rest() == ["a"]
