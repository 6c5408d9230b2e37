[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cprkit"
version = "0.1.0"
description = "Building blocks for HTTP clients: timeouts, cookies, header parsing, request options and a resizable thread pool."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "cookies", "headers", "threadpool", "timeout", "range"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cprkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
