[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cwcounter"
version = "0.1.0"
description = "A counter smart contract with owner-only reset and JSON messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["smart-contract", "counter", "json", "cosmwasm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cwcounter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
