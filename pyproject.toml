[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numkit"
version = "0.1.0"
description = "Small numeric toolkit: a 24 game solver, float-to-fraction conversion, big integers, byte-array arithmetic and differentiation of expression graphs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "24 game",
    "fraction",
    "big integer",
    "fixed-width arithmetic",
    "automatic differentiation",
    "symbolic derivative",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numkit-24 = "numkit.calculate24:main"
numkit-frac = "numkit.fraction:main"

[tool.hatch.build.targets.wheel]
packages = ["numkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
