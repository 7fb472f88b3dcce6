[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "amrtools"
version = "0.1.0"
description = "Kinematics, odometry, teleoperation and mission helpers for a mobile robot with a right arm"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["robotics", "odometry", "kinematics", "teleoperation", "mobile robot"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["amrtools"]

[tool.pytest.ini_options]
addopts = "-ra"
