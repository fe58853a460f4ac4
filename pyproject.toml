[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paxboard"
version = "0.1.0"
description = "A small home dashboard linking local services and showing large-model-proxy resource usage"
requires-python = ">=3.11"
keywords = ["dashboard", "homelab", "aiohttp", "services", "large-model-proxy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: AsyncIO",
    "Framework :: aiohttp",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "aiohttp",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
paxboard = "paxboard.server:main"

[tool.hatch.build.targets.wheel]
packages = ["paxboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
