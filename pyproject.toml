[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "easyfunc"
version = "0.1.0"
description = "Familiar string and value helpers: chr, ord, trim, strpos, str_pad, ucwords and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "text", "trim", "padding", "helpers", "utilities"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["easyfunc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
