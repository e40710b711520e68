[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xlmkit"
version = "5.0.1"
description = "Stellar signing-device protocol helpers: APDU parsing, dispatch and framing, BIP32 paths, base32/base58, varints and number formatting"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "stellar",
    "xlm",
    "apdu",
    "bip32",
    "base32",
    "base58",
    "varint",
    "hardware-wallet",
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xlmkit"]

[tool.pytest.ini_options]
addopts = "-ra"
