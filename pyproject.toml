[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ponadapter"
version = "0.1.0"
description = "PON adapter building blocks: status codes, OMCI CRC-32, levelled debug output, optic and event interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["pon", "omci", "gpon", "crc32", "optical", "ddmi", "sfp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ponadapter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
