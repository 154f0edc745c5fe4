[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tweetkit"
version = "0.1.0"
description = "Request parameters, field lists, rate-limit parsing and error types for the Twitter API v2"
requires-python = ">=3.10"
dependencies = []
keywords = ["twitter", "api", "v2", "compliance", "rate-limit", "fields"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tweetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
