[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sockwrap"
version = "0.1.0"
description = "Object-oriented wrappers around BSD sockets: stream sockets, Unix-domain and SocketCAN addresses"
requires-python = ">=3.10"
dependencies = []
keywords = ["socket", "network", "stream", "unix-domain", "socketcan", "can", "scatter-gather"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sockwrap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
