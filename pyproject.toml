[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bl1tool"
version = "0.1.0"
description = "Build and check S5PV210 BL1 boot images with their 16-byte size and checksum header"
requires-python = ">=3.10"
dependencies = []
keywords = ["bl1", "bootloader", "s5pv210", "sd card", "firmware image", "checksum"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bl1tool = "bl1tool.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bl1tool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
