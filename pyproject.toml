[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codedrills"
version = "0.1.0"
description = "Small data-structure drills (LRU cache, chained hash map) and a headless solar-system scene model"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["lru-cache", "hash-map", "data-structures", "transforms", "sphere-mesh", "solar-system"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
codedrills-lru = "codedrills.lrucache:main"
codedrills-hashmap = "codedrills.hashmap:main"

[tool.hatch.build.targets.wheel]
packages = ["codedrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
