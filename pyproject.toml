[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flighttrack"
version = "0.1.0"
description = "Poll an aircraft state-vector service for planes overhead and render them as scrolling LED-matrix banners"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["aircraft", "adsb", "state-vectors", "led-matrix", "flight-tracking", "udp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
flighttrack-transmit = "flighttrack.transmitter:main"
flighttrack-receive = "flighttrack.receiver:main"

[tool.hatch.build.targets.wheel]
packages = ["flighttrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
