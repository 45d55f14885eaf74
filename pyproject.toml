[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "handcollections"
version = "0.1.0"
description = "Reference-counted handles and hand-built containers: Rc, Arc/Weak, Vec, RingBuffer, Deque and a doubly linked list"
requires-python = ">=3.10"
dependencies = []
keywords = ["collections", "deque", "linked list", "reference counting", "ring buffer", "vector"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["handcollections"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
