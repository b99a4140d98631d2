[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "webgopher"
version = "0.1.0"
description = "A concurrent web crawler that counts internal links across a single site"
requires-python = ">=3.10"
dependencies = []
keywords = ["crawler", "web", "links", "spider", "report"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
    "Topic :: Internet :: WWW/HTTP :: Site Management :: Link Checking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
webgopher = "webgopher.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["webgopher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
