[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bytekit"
version = "0.1.0"
description = "Byte string helpers: ASCII scanning, byte-set searching and copy-on-write byte buffers."
requires-python = ">=3.10"
dependencies = []
keywords = ["bytes", "byteset", "ascii", "search", "byte string", "copy-on-write"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["bytekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
