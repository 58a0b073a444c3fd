from .radiometry import (  # noqa
    planck_wave,
    planck_wave_array,
    planck_wave_exitance,
    planck_wave_exitance_array,
    planck_wave_exitance_scalar,
    planck_wave_scalar,
)
