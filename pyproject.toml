[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "campuslookup"
version = "0.1.0"
description = "A TCP main server that answers which campus server holds a department, with an interactive client"
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "socket", "client-server", "lookup", "department", "campus"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
campuslookup-server = "campuslookup.server:main"
campuslookup-client = "campuslookup.client:main"

[tool.hatch.build.targets.wheel]
packages = ["campuslookup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
