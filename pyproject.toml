[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tagpolicy"
version = "0.1.0"
description = "Select the latest container image tag by semver, alphabetical or numerical policy"
requires-python = ">=3.10"
dependencies = []
keywords = ["container", "image", "tag", "semver", "policy", "registry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Software Distribution",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tagpolicy"]

[tool.pytest.ini_options]
addopts = "-ra"
