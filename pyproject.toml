[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xvuser"
version = "0.1.0"
description = "Small Unix-style user utilities, a shell command parser, a free-list allocator and RISC-V Sv39 layout helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "unix",
    "utilities",
    "grep",
    "wc",
    "shell",
    "parser",
    "malloc",
    "elf",
    "virtio",
    "risc-v",
    "sv39",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xv-cat = "xvuser.textutils:cat_main"
xv-echo = "xvuser.textutils:echo_main"
xv-grep = "xvuser.grep:main"
xv-wc = "xvuser.wc:main"
xv-ls = "xvuser.fileutils:ls_main"
xv-find = "xvuser.fileutils:find_main"
xv-ln = "xvuser.fileutils:ln_main"
xv-mkdir = "xvuser.fileutils:mkdir_main"
xv-rm = "xvuser.fileutils:rm_main"
xv-primes = "xvuser.primes:main"

[tool.hatch.build.targets.wheel]
packages = ["xvuser"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
