[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mandelview"
version = "0.1.0"
description = "Interactive Mandelbrot set viewer with four interchangeable escape-count renderers"
requires-python = ">=3.10"
keywords = ["mandelbrot", "fractal", "visualization", "pygame", "numpy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mandelview = "mandelview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mandelview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
