[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcpft"
version = "0.1.0"
description = "Chunked file transfer over a single TCP connection"
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "file transfer", "socket", "chunk", "threading"]
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
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tcpft = "tcpft.main:main"

[tool.hatch.build.targets.wheel]
packages = ["tcpft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
