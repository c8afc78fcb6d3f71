[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numtoys"
version = "0.1.0"
description = "Small number toys: e and pi to many digits, Fibonacci, primes, Ackermann, fraction approximation, a weak-LCG seed search, a turtle plotter and clock printers"
requires-python = ">=3.10"
dependencies = [
    "mpmath",
]
keywords = [
    "e",
    "pi",
    "fibonacci",
    "primes",
    "ackermann",
    "stern-brocot",
    "bignum",
    "turtle",
    "lcg",
    "epoch",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
epoch = "numtoys.clock:main_epoch"
hex-epoch = "numtoys.clock:main_hex_epoch"
neodate = "numtoys.clock:main_neodate"
epoch-ns = "numtoys.clock:main_ns"
epoch-us = "numtoys.clock:main_us"
ackermann = "numtoys.ackermann:main"
approx = "numtoys.approx:main"
circle = "numtoys.circle:main"
logfactorial = "numtoys.logfactorial:main"
notfib = "numtoys.notfib:main"
prime = "numtoys.prime:main"
fastfib = "numtoys.fastfib:main"
simpleturtle = "numtoys.turtleplot:main"
pi-integrate = "numtoys.pi:main_integrate"
pi-fast = "numtoys.pi:main_fast"
rand-blast = "numtoys.randblast:main"
e-normal = "numtoys.euler:main_normal"
e-pipeline = "numtoys.euler:main_pipeline"
ecalc = "numtoys.ecalc:main"

[tool.hatch.build.targets.wheel]
packages = ["numtoys"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
