[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drills"
version = "0.1.0"
description = "Small command-line tools: a greeting, argument handling, file reading and moving, a calculator, an SQLite check, a fan-out writer and a TCP message pair"
requires-python = ">=3.11"
dependencies = []
keywords = ["cli", "calculator", "tcp", "file-io", "sqlite", "toml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drills-hello = "drills.hello:main"
drills-repeat = "drills.repeat:main"
drills-cat = "drills.cat:main"
drills-move = "drills.move:main"
drills-calc = "drills.calculator:main"
drills-calc-log = "drills.calculator:log_main"
drills-db-check = "drills.db_check:main"
drills-fanout = "drills.fanout_writer:main"
drills-echo-server = "drills.echo_net:server_main"
drills-echo-client = "drills.echo_net:client_main"

[tool.hatch.build.targets.wheel]
packages = ["drills"]

[tool.hatch.build.targets.sdist]
include = ["drills", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
