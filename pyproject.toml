[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ebsmeta"
version = "0.1.0"
description = "Instance metadata discovery and EBS volume attachment limits for EC2 nodes"
requires-python = ">=3.10"
dependencies = []
keywords = ["ebs", "ec2", "metadata", "csi", "kubernetes", "volumes", "outposts"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ebsmeta"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
