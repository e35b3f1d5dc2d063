[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkedstructs"
version = "0.1.0"
description = "Singly and doubly linked lists, plus bounded stacks and queues built on linked lists, Python lists or a ring buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "stack", "queue", "circular buffer", "data structures"]
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
test = ["pytest", "hypothesis"]

[project.scripts]
linkedstructs-demo = "linkedstructs.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["linkedstructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
