[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minimips"
version = "0.1.0"
description = "A small interactive simulator for a subset of the MIPS instruction set"
requires-python = ">=3.10"
dependencies = []
keywords = ["mips", "simulator", "emulator", "assembly", "disassembler", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minimips = "minimips.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minimips"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
