from __future__ import annotations

import logging

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..constants import b_wien
from ..errors import DomainError
from ..functions import (
    planck_wave_array,
    planck_wave_exitance_array,
    planck_wave_exitance_scalar,
    planck_wave_scalar,
)
from ..functions.radiometry import _is_scalar

logger = logging.getLogger("planckwave")


class BlackBody:
    """
    An ideal black body at a single temperature.
    """

    def __init__(
        self,
        temperature: float,  # in Kelvin
        name: str = None,
        description: str = "",
    ):
        if not (np.isfinite(temperature) and temperature > 0):
            raise DomainError("temperature", temperature)

        self.temperature = float(temperature)
        self.name = name or f"{self.temperature:.0f}K"
        self.description = description

    @property
    def peak_wavelength(self):
        """
        The wavelength of peak spectral radiance, in meters, from Wien's displacement law.
        """
        return b_wien / self.temperature

    def _evaluate(self, wavelength, scalar_func, array_func):
        if _is_scalar(wavelength):
            return scalar_func(wavelength, self.temperature)
        return array_func(wavelength, np.full(len(wavelength), self.temperature))

    def radiance(self, wavelength):
        """
        wavelength: a wavelength or a sequence of wavelengths, in meters
        """
        return self._evaluate(wavelength, planck_wave_scalar, planck_wave_array)

    def exitance(self, wavelength):
        return self._evaluate(wavelength, planck_wave_exitance_scalar, planck_wave_exitance_array)

    def summary(self):
        filling = {
            "name": self.name,
            "temperature": f"{self.temperature} K",
            "peak_wavelength": f"{1e6 * self.peak_wavelength:.04g} um",
            "description": self.description,
        }

        return pd.Series(filling)

    def __repr__(self):
        return f"BlackBody({', '.join([f'{index}={entry}' for index, entry in self.summary().items()])})"

    def plot(self, wavelength=None, samples: int = 1024):
        if wavelength is None:
            wavelength = np.geomspace(1e-1 * self.peak_wavelength, 1e2 * self.peak_wavelength, samples)
            logger.debug(f"Plotting {self.name} between {wavelength.min():.03e} and {wavelength.max():.03e} m.")

        wavelength = np.asarray(wavelength)

        fig, ax = plt.subplots(1, 1)

        ax.plot(1e6 * wavelength, self.radiance(wavelength), label=self.name)

        ax.set_xscale("log")
        ax.set_yscale("log")
        ax.set_xlim(1e6 * wavelength.min(), 1e6 * wavelength.max())
        ax.set_xlabel(r"$\lambda$ [$\mu$m]")
        ax.set_ylabel(r"$B_\lambda(T)$ [W sr$^{-1}$ m$^{-3}$]")
        ax.legend()
