[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sambaflash"
version = "0.1.0"
description = "Building blocks for programming the flash of SAM-BA boot loader devices over a serial port"
requires-python = ">=3.10"
dependencies = []
keywords = ["sam-ba", "flash", "bootloader", "serial", "microcontroller", "firmware", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sambaflash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
