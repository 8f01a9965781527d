[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soulseek"
version = "0.1.0"
description = "Wire-level building blocks for the Soulseek peer-to-peer file sharing protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["soulseek", "p2p", "file-sharing", "protocol", "networking"]
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
    "Topic :: Communications :: File Sharing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["soulseek"]

[tool.hatch.build.targets.sdist]
include = ["soulseek", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
