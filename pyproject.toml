[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "webparser"
version = "0.1.0"
description = "Fetch event listing pages with a persistent cookie file and print the event titles found in their HTML."
requires-python = ">=3.10"
dependencies = [
    "beautifulsoup4",
]
keywords = ["html", "scraper", "events", "links", "cookies"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
webparser = "webparser.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["webparser"]

[tool.pytest.ini_options]
addopts = "-ra"
