[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rulekit"
version = "0.1.1"
description = "A small, composable rule engine for evaluating and applying prioritised rules to a context."
requires-python = ">=3.10"
dependencies = []
keywords = ["rule", "engine", "logic", "business-rules"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
rulekit-demo = "rulekit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["rulekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
