[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptkit"
version = "0.1.0"
description = "Small building blocks for cryptographic code: hex literals, in/out buffers, opaque reprs and Wycheproof vector conversion"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "hex",
    "buffers",
    "wycheproof",
    "test-vectors",
]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cryptkit"]

[tool.hatch.build.targets.sdist]
include = ["cryptkit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
