[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edhash"
version = "0.1.0"
description = "Pure-Python SHA-2 and SHA-3 hash functions, random byte sources and Ed25519 test-vector helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["sha256", "sha512", "sha3", "keccak", "hash", "randombytes", "ed25519", "test-vectors"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["edhash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
