import pytest

from nacafoil.designation import (
    FIVE_DIGIT_CAMBER,
    FiveDigitSeries,
    FourDigitSeries,
    InvalidDesignationError,
    UndefinedCamberError,
    UnsupportedDesignationError,
    parse_designation,
)


def test_naca2412():
    s = parse_designation(2412)
    assert isinstance(s, FourDigitSeries)
    assert s.m == pytest.approx(0.02)
    assert s.p == pytest.approx(0.4)
    assert s.t == pytest.approx(0.12)


@pytest.mark.parametrize("number", range(1000, 10000, 37))
def test_four_digit_reconstructs_designation(number):
    s = parse_designation(number)
    M, P, XX = round(s.m * 100), round(s.p * 10), round(s.t * 100)
    assert M * 1000 + P * 100 + XX == number


def test_string_keeps_leading_zeros():
    s = parse_designation("0012")
    assert isinstance(s, FourDigitSeries)
    assert s.number == 12
    assert (s.m, s.p) == (0.0, 0.0)
    assert s.t == pytest.approx(0.12)


def test_integer_with_leading_zeros_dropped_is_unsupported():
    with pytest.raises(UnsupportedDesignationError):
        parse_designation(12)


@pytest.mark.parametrize(
    "number, p, m, k1",
    [
        (21012, 0.05, 0.058, 361.4),
        (22012, 0.10, 0.126, 51.64),
        (23012, 0.15, 0.2025, 15.957),
        (24012, 0.20, 0.29, 6.643),
        (25012, 0.25, 0.391, 3.23),
    ],
)
def test_five_digit_camber_table(number, p, m, k1):
    s = parse_designation(number)
    assert isinstance(s, FiveDigitSeries)
    assert s.p == pytest.approx(p)
    assert (s.m, s.k1) == (m, k1)
    assert s.t == pytest.approx(0.12)


def test_camber_table_has_only_standard_codes():
    assert sorted(FIVE_DIGIT_CAMBER) == [10, 20, 30, 40, 50]


@pytest.mark.parametrize("number", [23112, 26012, 20012, 10015, 99999])
def test_undefined_five_digit_camber(number):
    with pytest.raises(UndefinedCamberError):
        parse_designation(number)


def test_undefined_camber_is_value_error():
    with pytest.raises(ValueError, match="no standard camber line"):
        parse_designation("23112")


@pytest.mark.parametrize("value", [1, 99, 123, 123456, "123456", "012"])
def test_unsupported_digit_count(value):
    with pytest.raises(UnsupportedDesignationError):
        parse_designation(value)


@pytest.mark.parametrize("value", [0, -2412, "abc", "-2412", "24.12", "", "0000", 2412.5, True, None])
def test_invalid_designation(value):
    with pytest.raises(InvalidDesignationError):
        parse_designation(value)


def test_integral_float_accepted():
    assert parse_designation(4415.0) == parse_designation(4415)


def test_series_steps():
    assert (FourDigitSeries.fine_step, FourDigitSeries.coarse_step) == (1e-5, 1e-4)
    assert (FiveDigitSeries.fine_step, FiveDigitSeries.coarse_step) == (1e-6, 1e-5)
