[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "packframe"
version = "0.0.1"
description = "Frame objects with a marker, header, version, CRC32 checksum and length, plus byte escaping helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["framing", "crc32", "checksum", "escaping", "binary"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["packframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
