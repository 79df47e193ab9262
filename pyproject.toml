[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "melt"
version = "0.1.0"
description = "Type model, indentation preprocessor and Go type rendering for the melt language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "type-checker", "generics", "go", "language", "indentation"]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["melt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
