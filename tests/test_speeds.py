"""
Tests for the termios speed table.

Run with:
    pytest tests/test_speeds.py -v
"""

import termios

import pytest

from sercat import SPEEDS, SpeedEntry, value_for, symbol_for, supported_speeds


class TestSpeedTable:
    """Table contents."""

    def test_common_rates_present(self):
        speeds = supported_speeds()
        for rate in (0, 50, 300, 1200, 9600, 19200, 38400):
            assert rate in speeds

    def test_entries_match_termios(self):
        for entry in SPEEDS:
            assert isinstance(entry, SpeedEntry)
            assert getattr(termios, f'B{entry.value}') == entry.symbol

    def test_symbols_unique(self):
        symbols = [entry.symbol for entry in SPEEDS]
        assert len(symbols) == len(set(symbols))

    def test_values_unique(self):
        values = [entry.value for entry in SPEEDS]
        assert len(values) == len(set(values))

    def test_table_is_immutable(self):
        with pytest.raises(TypeError):
            SPEEDS[0] = SpeedEntry(0, 1)

    @pytest.mark.skipif(not hasattr(termios, 'B115200'),
                        reason="platform has no B115200")
    def test_high_rate_present_when_platform_has_it(self):
        assert 115200 in supported_speeds()


class TestLookups:
    """value_for() / symbol_for()."""

    def test_value_for_known_symbol(self):
        assert value_for(termios.B9600) == 9600
        assert value_for(termios.B0) == 0

    def test_symbol_for_known_value(self):
        assert symbol_for(9600) == termios.B9600
        assert symbol_for(38400) == termios.B38400

    def test_round_trip_every_value(self):
        for entry in SPEEDS:
            assert value_for(symbol_for(entry.value)) == entry.value

    def test_round_trip_every_symbol(self):
        for entry in SPEEDS:
            assert symbol_for(value_for(entry.symbol)) == entry.symbol

    @pytest.mark.parametrize('value', [1, 9601, 12345, 100000, -1])
    def test_unknown_value_not_found(self, value):
        assert symbol_for(value) is None

    def test_unknown_symbol_not_found(self):
        unused = max(entry.symbol for entry in SPEEDS) + 1
        assert value_for(unused) is None
        assert value_for(-1) is None

    def test_no_approximate_match(self):
        # 9599 is close to 9600 but must not map to it
        assert symbol_for(9599) is None
