[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "curpgen"
version = "0.1.1"
description = "Generate Mexican CURP (Clave Única de Registro de Población) keys from personal data"
requires-python = ">=3.10"
dependencies = []
keywords = ["curp", "renapo", "mexico", "identifier", "generator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["curpgen"]

[tool.pytest.ini_options]
addopts = "-ra"
