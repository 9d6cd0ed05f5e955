[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scratchweb"
version = "0.1.0"
description = "A small HTTP/1.1 server on plain sockets, with a handful of companion command-line utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "static-files", "query-string", "clock", "grep", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scratchweb-serve = "scratchweb.website_handler:main"
scratchweb-hello = "scratchweb.simple_server:main"
scratchweb-gigasecond = "scratchweb.gigasecond:main"
scratchweb-dip = "scratchweb.dip:main"
scratchweb-grep = "scratchweb.grep:main"
scratchweb-csvfilter = "scratchweb.csvfilter:main"

[tool.hatch.build.targets.wheel]
packages = ["scratchweb"]

[tool.pytest.ini_options]
addopts = "-ra"
