[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tpistream"
version = "0.1.0"
description = "Reader for the type (TPI) and id (IPI) streams of PDB debug information files"
requires-python = ">=3.10"
dependencies = []
keywords = ["pdb", "codeview", "debug-information", "tpi", "ipi", "types"]
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
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tpistream"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
