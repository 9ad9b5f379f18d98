[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "udpdecode"
version = "0.1.0"
description = "Decode UDP datagram headers and payloads from raw bytes, and receive a single datagram"
requires-python = ">=3.10"
dependencies = []
keywords = ["udp", "datagram", "networking", "parser", "packet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
udpdecode = "udpdecode.datagram:main"
udpdecode-listen = "udpdecode.receiver:main"

[tool.hatch.build.targets.wheel]
packages = ["udpdecode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
