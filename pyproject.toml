[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rhcadastro"
version = "0.1.0"
description = "Terminal-based employee register with binary storage and text/CSV exports"
requires-python = ">=3.10"
dependencies = []
keywords = ["human resources", "employees", "register", "csv", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rhcadastro = "rhcadastro.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rhcadastro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
