"""Tests for kind_checker.network — IPv4 dotted-quad recognition."""

import pytest
from kind_checker.core.types import UNDEFINED
from kind_checker.network import is_ipv4


class TestIsIpv4:
    @pytest.mark.parametrize('value', ['255.255.255.255', '0.0.0.0', '192.168.1.1', '10.0.0.1', '1.2.3.4',
                                       '199.249.100.9'])
    def test_valid(self, value):
        assert is_ipv4(value)

    @pytest.mark.parametrize(
        'value',
        [
            '256.1.1.1',
            '01.1.1.1',
            '1.1.1.00',
            '1.1.1',
            '1.1.1.1.1',
            '1.1.1.1/24',
            ' 1.1.1.1',
            '1.1.1.1\n',
            '+1.1.1.1',
            '0x1.1.1.1',
            '1..1.1',
            '',
            '::1',
        ],
    )
    def test_invalid(self, value):
        assert not is_ipv4(value)

    def test_non_strings(self):
        for value in [None, UNDEFINED, 16843009, ['1.1.1.1'], b'1.1.1.1']:
            assert not is_ipv4(value)
