[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "printfkit"
version = "0.1.0"
description = "A printf-style formatter with flags, width, precision, length modifiers and a custom-base conversion"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "format", "sprintf", "snprintf", "string formatting"]
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["printfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
