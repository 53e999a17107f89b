[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbox"
version = "0.1.0"
description = "Classic data structures, sorting algorithms and small interactive console exercises"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "binary search tree",
    "stack",
    "circular queue",
    "sorting",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drillbox-factorial = "drillbox.factorial:main"
drillbox-palindrome = "drillbox.palindrome:main"
drillbox-employees = "drillbox.employees:main"

[tool.hatch.build.targets.wheel]
packages = ["drillbox"]

[tool.pytest.ini_options]
addopts = "-ra"
