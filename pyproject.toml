[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leaderworkerset"
version = "0.1.0"
description = "API types, configuration defaulting and apply configurations for LeaderWorkerSet workloads"
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "leaderworkerset", "workload", "scheduling", "apply-configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Clustering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["leaderworkerset"]

[tool.pytest.ini_options]
addopts = "-ra"
