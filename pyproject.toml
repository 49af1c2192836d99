[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phistratum"
version = "1.2.4"
description = "Building blocks for Stratum mining pool clients: request builders, job data types and 256-bit target arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["stratum", "mining", "pool", "ethash", "jsonrpc", "uint256"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Internet",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["phistratum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
