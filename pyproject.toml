[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maskrecover"
version = "0.1.0"
description = "Recover an original image by testing bitwise transformations against masking records"
requires-python = ">=3.10"
dependencies = ["pillow"]
keywords = ["bmp", "image", "bitwise", "xor", "masking", "reconstruction"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
maskrecover = "maskrecover.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["maskrecover"]

[tool.pytest.ini_options]
addopts = "-ra"
