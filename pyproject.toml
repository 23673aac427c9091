[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zbplugin"
version = "1.6.1"
description = "Chat bot plugin toolkit: reply logic, moderation stores, subscriptions and bot configuration"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["chatbot", "onebot", "plugins", "moderation", "subscriptions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zbplugin = "zbplugin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zbplugin"]

[tool.pytest.ini_options]
addopts = "-ra"
