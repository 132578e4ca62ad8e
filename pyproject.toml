[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcphttp"
version = "0.1.0"
description = "A streaming HTTP/1.1 request parser over raw TCP, with response-writing helpers and a request-printing listener"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "tcp", "parser", "sockets"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tcphttp-listen = "tcphttp.tcplistener:main"

[tool.hatch.build.targets.wheel]
packages = ["tcphttp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
