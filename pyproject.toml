[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "siojson"
version = "0.1.0"
description = "JSON values that may carry binary, JSON objects with typed fields, and simple JSON HTTP requests"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "binary", "http", "requests", "base64"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["siojson"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
