[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "joguinhos"
version = "0.1.0"
description = "Small terminal games and exercises: pacman with bombs, hangman, number guessing, a record registry, matrix drills and a spinner."
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "terminal", "pacman", "hangman", "guessing-game", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
joguinhos-pacman = "joguinhos.pacman:main"
joguinhos-spinner = "joguinhos.spinner:main"
joguinhos-cadastro = "joguinhos.cadastro:main"
joguinhos-cadastro-classic = "joguinhos.cadastro_classic:main"
joguinhos-forca = "joguinhos.forca:main"
joguinhos-adivinhacao = "joguinhos.adivinhacao:main"
joguinhos-exercicios = "joguinhos.exercicios:main"

[tool.hatch.build.targets.wheel]
packages = ["joguinhos"]

[tool.hatch.build.targets.sdist]
include = ["joguinhos", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
