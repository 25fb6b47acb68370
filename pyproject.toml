[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geomatsim"
version = "0.1.0"
description = "Constitutive models for geomaterials: elastic, Mohr-Coulomb, Drucker-Prager and Hoek-Brown stress updates with supporting numerics"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "finite element",
    "constitutive model",
    "plasticity",
    "Mohr-Coulomb",
    "Drucker-Prager",
    "Hoek-Brown",
    "geomechanics",
    "principal stress",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["geomatsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
