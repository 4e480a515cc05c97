[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "samkit"
version = "0.1.0"
description = "Small dependency-free helpers: AES-128/256 CBC and AES-128 ECB, base64, the Internet checksum, size and duration parsing, hex dumps and file copying"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "cbc", "ecb", "base64", "checksum", "rfc1071", "hexdump", "utilities"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["samkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
