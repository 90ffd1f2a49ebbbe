[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corekit"
version = "0.1.0"
description = "Everyday building blocks: byte streams, character readers, typed buffers, boxed values, dates, UUIDs, JSON helpers and small networking wrappers."
requires-python = ">=3.10"
dependencies = []
keywords = ["io", "streams", "buffers", "readers", "uuid", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["corekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
