[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "beoutil"
version = "0.1.0"
description = "PLC-style building blocks for control loops: edge triggers, IEC timers, bit arrays, scaling, motor logic and pulse counters"
requires-python = ">=3.10"
dependencies = []
keywords = ["plc", "iec-61131", "timer", "trigger", "motor", "control", "automation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["beoutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
