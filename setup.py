from os import path

import setuptools

here = path.abspath(path.dirname(__file__))

with open(path.join(here, "README.rst"), encoding="utf-8") as readme_file:
    readme = readme_file.read()

with open(path.join(here, "requirements.txt")) as requirements_file:
    # Parse requirements.txt, ignoring any commented-out lines.
    requirements = [
        line
        for line in requirements_file.read().splitlines()
        if line and not line.startswith("#")
    ]

setuptools.setup(
    name="planckwave",
    version="0.1.0",
    description="Black-body spectral radiance per unit wavelength, from Planck's law.",
    long_description=readme,
    python_requires=">=3.10",
    packages=setuptools.find_packages(exclude=["docs", "tests"]),
    include_package_data=True,
    package_data={
        "planckwave": [
            # When adding files here, remember to update MANIFEST.in as well,
            # or else they will not be included in the distribution on PyPI!
            "source/sources/*.yml",
        ]
    },
    install_requires=requirements,
    extras_require={
        "test": ["pytest", "astropy"],
    },
    license="BSD (3-clause)",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
    ],
)
