from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


class InvalidDesignationError(ValueError):
    """Designation is not a positive integer."""


class UnsupportedDesignationError(ValueError):
    """Designation does not have 4 or 5 digits."""


class UndefinedCamberError(ValueError):
    """5-digit camber-position code with no standard camber line."""


# camber-position code (digits 2-3 of LPQXX) -> (m, k1)
FIVE_DIGIT_CAMBER = {
    10: (0.058, 361.4),
    20: (0.126, 51.64),
    30: (0.2025, 15.957),
    40: (0.29, 6.643),
    50: (0.391, 3.23),
}


@dataclass(frozen=True)
class FourDigitSeries:
    """
    Parameters of a NACA 4-digit section (MPXX).

    Attributes
    ----------
    number : int
        Designation as an integer (leading zeros dropped).
    m : float
        Maximum camber as fraction of chord.
    p : float
        Location of maximum camber as fraction of chord.
    t : float
        Maximum thickness as fraction of chord.
    """

    number: int
    m: float
    p: float
    t: float

    digits = 4
    fine_step = 1e-5
    coarse_step = 1e-4


@dataclass(frozen=True)
class FiveDigitSeries:
    """
    Parameters of a NACA 5-digit section (LPQXX).

    Attributes
    ----------
    number : int
        Designation as an integer (leading zeros dropped).
    m : float
        Junction of the forward and aft camber-line branches (fraction of chord).
    k1 : float
        Camber-line scaling constant.
    p : float
        Location of maximum camber as fraction of chord.
    t : float
        Maximum thickness as fraction of chord.
    """

    number: int
    m: float
    k1: float
    p: float
    t: float

    digits = 5
    fine_step = 1e-6
    coarse_step = 1e-5


Series = Union[FourDigitSeries, FiveDigitSeries]


def _split_designation(value: int | str) -> tuple[int, int]:
    """
    Return (number, digit_count) for a designation given as int or digit string.
    """
    if isinstance(value, bool):
        raise InvalidDesignationError("NACA designation must be an integer, not a bool")

    if isinstance(value, str):
        code = value.strip()
        if not code.isdecimal():
            raise InvalidDesignationError(f"NACA designation must contain digits only, got {value!r}")
        number = int(code)
        if number <= 0:
            raise InvalidDesignationError(f"NACA designation must be positive, got {value!r}")
        # keep leading zeros: "0012" is a 4-digit code
        return number, len(code)

    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidDesignationError(f"NACA designation must be an integer, got {value!r}")
        value = int(value)

    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise InvalidDesignationError(f"NACA designation must be an integer, got {value!r}") from e

    if number <= 0:
        raise InvalidDesignationError(f"NACA designation must be positive, got {number}")

    return number, math.floor(math.log10(abs(number))) + 1


def parse_naca4(number: int) -> FourDigitSeries:
    """
    Decompose a NACA 4-digit designation MPXX.

    Parameters
    ----------
    number : int
        Designation as an integer (e.g. 2412).

    Returns
    -------
    FourDigitSeries
        m = M/100, p = P/10, t = XX/100.
    """
    t = (number % 100) / 100.0
    p = ((number // 100) % 10) / 10.0
    m = (number // 1000) / 100.0
    return FourDigitSeries(number=number, m=m, p=p, t=t)


def parse_naca5(number: int) -> FiveDigitSeries:
    """
    Decompose a NACA 5-digit designation LPQXX.

    Parameters
    ----------
    number : int
        Designation as an integer (e.g. 23012).

    Returns
    -------
    FiveDigitSeries
        p = PQ/200 with (m, k1) from the standard camber table.

    Raises
    ------
    UndefinedCamberError
        If PQ is not one of the five standard camber-position codes.
    """
    t = (number % 100) / 100.0
    code = (number // 100) % 100
    if code not in FIVE_DIGIT_CAMBER:
        raise UndefinedCamberError(
            f"NACA {number:05d}: no standard camber line for position code {code:02d} "
            f"(p = {code / 200.0:g}); expected one of "
            + ", ".join(f"{c:02d}" for c in sorted(FIVE_DIGIT_CAMBER))
        )
    m, k1 = FIVE_DIGIT_CAMBER[code]
    return FiveDigitSeries(number=number, m=m, k1=k1, p=code / 200.0, t=t)


def parse_designation(value: int | str) -> Series:
    """
    Validate a NACA designation and dispatch it to its series.

    Parameters
    ----------
    value : int or str
        Designation. Strings keep leading zeros, so "0012" is 4-digit.

    Returns
    -------
    FourDigitSeries or FiveDigitSeries
    """
    number, n_digits = _split_designation(value)

    if n_digits == 4:
        return parse_naca4(number)
    if n_digits == 5:
        return parse_naca5(number)

    raise UnsupportedDesignationError(
        f"Unsupported NACA designation {value!r}: expected 4 or 5 digits, got {n_digits}"
    )
