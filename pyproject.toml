[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qlogger"
version = "0.1.0"
description = "Thread-backed logger with templated messages written to the console, a file, or both"
requires-python = ">=3.10"
keywords = ["logging", "logger", "thread", "queue", "template"]
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
    "Topic :: System :: Logging",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qlogger-demo = "qlogger.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["qlogger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
