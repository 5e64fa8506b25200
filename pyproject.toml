[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ilmachine"
version = "0.1.0"
description = "An Instruction List accumulator machine, a bounded-stack virtual machine, and small array, list and text utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "interpreter",
    "instruction-list",
    "virtual-machine",
    "stack-machine",
    "accumulator",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ilmachine = "ilmachine.il_machine:main"
ilmachine-stack = "ilmachine.stack_vm_parser:main"
ilmachine-list = "ilmachine.linked_list:main"
ilmachine-bounded-stack = "ilmachine.bounded_stack:main"
ilmachine-arrays = "ilmachine.arrays:main"
ilmachine-tasks = "ilmachine.logic_tasks:main"
ilmachine-sorting = "ilmachine.sorting:main"
ilmachine-text = "ilmachine.text_functions:main"

[tool.hatch.build.targets.wheel]
packages = ["ilmachine"]

[tool.hatch.build.targets.sdist]
include = ["ilmachine", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
