import numpy as np

# speed of light (m s^-1)
c = 2.99792458e8

# Planck's constant (kg m^2 s)
h = 6.62607015e-34

# Boltzmann's constant (kg m^2 s^-2 K^-1)
k_B = 1.380649e-23

# first radiation constant, 2 pi h c^2 (W m^2)
C1 = 3.741771790075259e-16

# first radiation constant for spectral radiance, 2 h c^2 (W m^2 sr^-1)
C1L = C1 / np.pi

# second radiation constant, h c / k_B (m K)
C2 = 1.43877735382772e-2

# Wien's displacement constant (m K)
b_wien = 2.897771955e-3
