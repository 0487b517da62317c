[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nodekit"
version = "0.1.0"
description = "Singly linked list, stack and bounded queue, with binary/decimal conversion tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "stack", "queue", "data structures", "binary"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
nodekit-bin-to-dec = "nodekit.bin_to_dec:main"
nodekit-dec-to-bin = "nodekit.dec_to_bin:main"

[tool.hatch.build.targets.wheel]
packages = ["nodekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
