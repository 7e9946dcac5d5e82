"""Unit tests for the observers."""

import io

import numpy as np
import pytest

from numint.observers import DecimatingObserver, Observer, PrintObserver


def test_default_observer_is_noop():
    state = [1.0, 2.0]
    assert Observer()(state, 0.0) is None
    assert state == [1.0, 2.0]


class TestDecimatingObserver:

    def test_every_third(self):
        observer = DecimatingObserver(3)
        fired = [i for i in range(1, 10) if observer.observe()]
        assert fired == [3, 6, 9]

    def test_zero_always_fires(self):
        observer = DecimatingObserver(0)
        assert all(observer.observe() for _ in range(9))

    def test_default_fires_every_call(self):
        observer = DecimatingObserver()
        assert all(observer.observe() for _ in range(5))

    def test_call_consumes_a_tick(self):
        observer = DecimatingObserver(2)
        observer([0.0], 0.0)
        assert observer.observe() is True

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            DecimatingObserver(-1)


class TestPrintObserver:

    def test_line_format(self):
        out = io.StringIO()
        observer = PrintObserver(stream=out)
        observer([1.0, 2.0], 0.5)
        assert out.getvalue() == "0.5 [1.0, 2.0]\n"

    def test_uses_state_formatting(self):
        out = io.StringIO()
        state = np.array([1.0, 2.5])
        PrintObserver(stream=out)(state, 1.0)
        assert out.getvalue() == f"1.0 {state}\n"

    def test_decimated(self):
        out = io.StringIO()
        observer = PrintObserver(decimation=2, stream=out)
        for i in range(1, 7):
            observer([float(i)], float(i))
        assert out.getvalue().splitlines() == ["2.0 [2.0]", "4.0 [4.0]", "6.0 [6.0]"]

    def test_defaults_to_stdout(self, capsys):
        PrintObserver()([3], 1)
        assert capsys.readouterr().out == "1 [3]\n"
