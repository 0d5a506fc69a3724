[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smorphi"
version = "0.1.0"
description = "Control logic for a mecanum-wheel robot base: wheel kinematics, PID obstacle avoidance, wall following and keyboard teleoperation"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "mecanum", "kinematics", "pid", "wall-following", "obstacle-avoidance", "teleoperation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["smorphi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
