[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hellocoin"
version = "0.1.0"
description = "A small educational blockchain with proof-of-work mining and a UTXO ledger"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "utxo", "proof-of-work", "ledger", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hellocoin = "hellocoin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hellocoin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
