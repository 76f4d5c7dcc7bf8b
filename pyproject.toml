[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trantor"
version = "1.5.23"
description = "Small networking helpers: 64-bit byte-order conversion, string splitting, a multi-producer queue and scatter reads from sockets"
requires-python = ">=3.10"
dependencies = []
keywords = ["networking", "queue", "byte-order", "socket", "utilities"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trantor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
