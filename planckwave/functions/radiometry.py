from __future__ import annotations

import numbers
import time as ttime

import numpy as np

from ..constants import C1, C1L, C2
from ..errors import DomainError, ShapeMismatchError
from ..io import log_duration


def _log_planck(wavelength: float, temperature: float, c1: float):
    """
    Planck's law evaluated in log space, for when the direct form leaves the float64 range.
    """
    log_x = np.log(C2) - np.log(wavelength) - np.log(temperature)
    x = np.exp(log_x)

    if x > 1:
        log_expm1 = x + np.log1p(-np.exp(-x))
    elif x > 0:
        log_expm1 = np.log(np.expm1(x))
    else:
        # x underflowed, so e^x - 1 is x to double precision
        log_expm1 = log_x

    return np.exp(np.log(c1) - 5 * np.log(wavelength) - log_expm1)


def _planck(wavelength: float, temperature: float, c1: float):
    with np.errstate(over="ignore", under="ignore", divide="ignore", invalid="ignore"):
        value = c1 / (wavelength**5 * np.expm1(C2 / (wavelength * temperature)))
        if np.isfinite(value):
            return value
        return _log_planck(wavelength, temperature, c1)


def _parse_scalar(value, argument: str):
    if isinstance(value, np.ndarray) and (value.ndim == 0) and (value.dtype.kind in "iuf"):
        value = value.item()

    if not isinstance(value, numbers.Real):
        raise TypeError(f"'{argument}' must be a real number (got {type(value).__name__}).")

    x = np.float64(float(value))
    if not (np.isfinite(x) and x > 0):
        raise DomainError(argument, value)

    return x


def _is_scalar(value):
    try:
        return np.ndim(value) == 0
    except ValueError:
        # ragged nested sequences cannot be made into an array
        return False


def _parse_sequence(values, argument: str):
    try:
        arr = np.asarray(values)
    except ValueError as error:
        raise ShapeMismatchError(ragged=argument) from error

    if arr.dtype.kind not in "iuf":
        if (arr.dtype.kind != "O") or not all(isinstance(v, numbers.Real) for v in arr.ravel()):
            raise TypeError(f"'{argument}' must be a sequence of real numbers (got dtype {arr.dtype}).")

    return arr.astype(np.float64)


def _validate_sequence(values: np.ndarray, argument: str):
    bad = np.where(~(np.isfinite(values) & (values > 0)))[0]
    if len(bad):
        raise DomainError(argument, float(values[bad[0]]), index=int(bad[0]))


def _scalar(wavelength, temperature, c1: float):
    wavelength = _parse_scalar(wavelength, "wavelength")
    temperature = _parse_scalar(temperature, "temperature")
    return _planck(wavelength, temperature, c1)


def _array(wavelength, temperature, c1: float, quantity: str):
    ref_time = ttime.monotonic()

    wavelength = _parse_sequence(wavelength, "wavelength")
    temperature = _parse_sequence(temperature, "temperature")

    if (wavelength.ndim != 1) or (temperature.ndim != 1) or (wavelength.shape != temperature.shape):
        raise ShapeMismatchError(wavelength.shape, temperature.shape)

    _validate_sequence(wavelength, "wavelength")
    _validate_sequence(temperature, "temperature")

    res = np.fromiter(
        (_planck(w, t, c1) for w, t in zip(wavelength, temperature)),
        dtype=np.float64,
        count=len(wavelength),
    )

    log_duration(ref_time, f"Computed {quantity} for {len(res)} samples")

    return res


def planck_wave_scalar(wavelength: float, temperature: float):
    """
    Spectral radiance of a black body per unit wavelength, in W sr^-1 m^-3.

    wavelength: wavelength, in meters
    temperature: temperature of the black body, in Kelvin
    """
    return _scalar(wavelength, temperature, C1L)


def planck_wave_array(wavelength, temperature):
    """
    Element-wise spectral radiance of black bodies, in W sr^-1 m^-3.

    wavelength: sequence of wavelengths, in meters
    temperature: sequence of temperatures, in Kelvin, the same length as 'wavelength'
    """
    return _array(wavelength, temperature, C1L, quantity="radiance")


def planck_wave(wavelength, temperature):
    """
    Spectral radiance of a black body per unit wavelength, from Planck's law:

        B(λ, T) = 2hc^2 / (λ^5 (exp(hc / λk_BT) - 1))

    Pass either two scalars or two sequences of the same length, paired element-wise.
    The result is in W sr^-1 m^-3: a float for scalars, or an array for sequences.

    Raises DomainError for zero, negative or non-finite inputs, and ShapeMismatchError
    when the sequences have different lengths.
    """
    if _is_scalar(wavelength) and _is_scalar(temperature):
        return planck_wave_scalar(wavelength, temperature)
    return planck_wave_array(wavelength, temperature)


def planck_wave_exitance_scalar(wavelength: float, temperature: float):
    return _scalar(wavelength, temperature, C1)


def planck_wave_exitance_array(wavelength, temperature):
    return _array(wavelength, temperature, C1, quantity="exitance")


def planck_wave_exitance(wavelength, temperature):
    """
    Hemispherical spectral exitance of a black body per unit wavelength, in W m^-3.
    This is pi times the spectral radiance, and takes the same arguments as planck_wave.
    """
    if _is_scalar(wavelength) and _is_scalar(temperature):
        return planck_wave_exitance_scalar(wavelength, temperature)
    return planck_wave_exitance_array(wavelength, temperature)
