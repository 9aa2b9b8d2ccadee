[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbook"
version = "0.1.0"
description = "Classic data-structure, algorithm and operating-system drills as small Python modules and console programs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "data structures",
    "algorithms",
    "linked list",
    "binary tree",
    "scheduling",
    "memory allocation",
    "banker's algorithm",
    "producer consumer",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Natural Language :: Chinese (Simplified)",
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
drillbook-binarytree = "drillbook.binarytree:main"
drillbook-seqlist = "drillbook.seqlist:main"
drillbook-queue = "drillbook.linkedqueue:main"
drillbook-slist = "drillbook.slist:main"
drillbook-linkedlist = "drillbook.linkedlist:main"
drillbook-contacts = "drillbook.contacts:main"
drillbook-scheduling = "drillbook.scheduling:main"
drillbook-memory = "drillbook.memory:main"
drillbook-banker = "drillbook.banker:main"
drillbook-tictactoe = "drillbook.tictactoe:main"
drillbook-mathgame = "drillbook.mathgame:main"
drillbook-producer-consumer = "drillbook.producer_consumer:main"
drillbook-exercises = "drillbook.exercises:main"

[tool.hatch.build.targets.wheel]
packages = ["drillbook"]

[tool.hatch.build.targets.sdist]
include = ["drillbook", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
