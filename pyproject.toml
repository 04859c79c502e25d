[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stockapi"
version = "0.1.0"
description = "A small JSON HTTP API for managing products and units of measure backed by a SQL database"
requires-python = ">=3.10"
keywords = ["rest", "api", "inventory", "products", "measures", "flask", "sqlalchemy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "sqlalchemy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stockapi = "stockapi.app:main"

[tool.hatch.build.targets.wheel]
packages = ["stockapi"]

[tool.pytest.ini_options]
addopts = "-ra"
