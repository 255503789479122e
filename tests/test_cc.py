from lcvgc.cc import interpolate_exponential, interpolate_linear


def test_linear_steps_0():
    assert interpolate_linear(0, 127, 0) == []


def test_linear_steps_1():
    assert interpolate_linear(0, 127, 1) == [127]


def test_linear_steps_2():
    assert interpolate_linear(0, 127, 2) == [0, 127]


def test_linear_steps_3():
    assert interpolate_linear(0, 100, 3) == [0, 50, 100]


def test_linear_steps_5():
    assert interpolate_linear(0, 100, 5) == [0, 25, 50, 75, 100]


def test_linear_reverse():
    assert interpolate_linear(100, 0, 3) == [100, 50, 0]


def test_linear_no_change():
    assert interpolate_linear(64, 64, 3) == [64, 64, 64]


def test_linear_clamps_above_127():
    assert interpolate_linear(200, 200, 2) == [127, 127]
    assert interpolate_linear(0, 200, 1) == [127]


def test_exponential_steps_0():
    assert interpolate_exponential(0, 100, 0) == []


def test_exponential_steps_1():
    assert interpolate_exponential(0, 100, 1) == [100]


def test_exponential_steps_2():
    assert interpolate_exponential(0, 100, 2) == [0, 100]


def test_exponential_curve_below_linear():
    exp = interpolate_exponential(0, 100, 5)
    lin = interpolate_linear(0, 100, 5)
    for e, l in zip(exp[1:4], lin[1:4]):
        assert e <= l
    assert exp[0] == 0
    assert exp[4] == 100


def test_exponential_reverse():
    exp = interpolate_exponential(100, 0, 5)
    lin = interpolate_linear(100, 0, 5)
    for e, l in zip(exp[1:4], lin[1:4]):
        assert e >= l
    assert exp[0] == 100
    assert exp[4] == 0


def test_lengths_match_steps():
    for steps in range(10):
        assert len(interpolate_linear(3, 90, steps)) == steps
        assert len(interpolate_exponential(3, 90, steps)) == steps