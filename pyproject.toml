[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "menudrills"
version = "0.1.0"
description = "Small interactive menu programs: a calculator, a bank, a stack, a linked list and a student registry"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "menu", "stack", "linked-list", "banking", "calculator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
menudrills-calculator = "menudrills.calculator:main"
menudrills-bank = "menudrills.banking:main"
menudrills-stack = "menudrills.stack:main"
menudrills-linked-list = "menudrills.linked_list:main"
menudrills-students = "menudrills.students:main"

[tool.hatch.build.targets.wheel]
packages = ["menudrills"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
