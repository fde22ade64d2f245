[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "myteams"
version = "0.1.0"
description = "Data model, text storage and line parsing for a small team chat system"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "messaging", "teams", "database", "parsing"]
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
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["myteams"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
