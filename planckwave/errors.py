from __future__ import annotations


class DomainError(ValueError):
    def __init__(self, argument: str, value, index: int = None):
        self.argument = argument
        self.value = value
        self.index = index

        where = f"'{argument}'" if index is None else f"'{argument}' at index {index}"
        super().__init__(f"Bad value {where}: {value!r}; it must be a finite, strictly positive number.")


class ShapeMismatchError(ValueError):
    def __init__(self, wavelength_shape: tuple = None, temperature_shape: tuple = None, ragged: str = None):
        self.shapes = (wavelength_shape, temperature_shape)

        if ragged is not None:
            super().__init__(
                f"'{ragged}' is an inhomogeneous nested sequence; "
                f"'wavelength' and 'temperature' must be one-dimensional sequences."
            )
        elif (len(wavelength_shape) != 1) or (len(temperature_shape) != 1):
            super().__init__(
                f"'wavelength' and 'temperature' must be one-dimensional sequences "
                f"(got shapes {wavelength_shape} and {temperature_shape})."
            )
        else:
            super().__init__(
                f"'wavelength' and 'temperature' have mismatched lengths "
                f"({wavelength_shape[0]} and {temperature_shape[0]})."
            )
