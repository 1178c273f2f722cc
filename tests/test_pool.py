from utilkit.pool import Pool


def test_pool_reuses_put_items():
    calls = []

    def factory():
        calls.append(1)
        return bytearray(b"A")

    p = Pool(factory)
    res = p.get()
    assert bytes(res) == b"A"
    res.extend(b"B")
    p.put(res)
    res = p.get()
    assert len(calls) == 1
    assert bytes(res) == b"AB"


def test_pool_creates_when_empty():
    calls = []

    def factory():
        calls.append(1)
        return bytearray(b"A")

    p = Pool(factory)
    first = p.get()
    second = p.get()
    assert len(calls) == 2
    assert first is not second
    assert bytes(second) == b"A"


def test_pool_last_in_first_out():
    p = Pool(str)
    p.put("x")
    p.put("y")
    assert p.get() == "y"
    assert p.get() == "x"
    assert p.get() == ""