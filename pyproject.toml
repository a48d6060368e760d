[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "padview"
version = "0.1.0"
description = "Live on-screen view of gamepad buttons, sticks and triggers, drawn over a video image panel"
requires-python = ">=3.10"
keywords = ["gamepad", "controller", "joystick", "pygame", "visualizer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: pygame",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
padview = "padview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["padview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
