[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmpchat"
version = "0.1.0"
description = "BMP colour analysis with a TCP echo chat and an SVG palette pie-chart server"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "colors", "palette", "svg", "pie chart", "socket", "chat"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bmpchat-chat-server = "bmpchat.chat_server:main"
bmpchat-chat-client = "bmpchat.chat_client:main"
bmpchat-palette-client = "bmpchat.palette_client:main"
bmpchat-pie-server = "bmpchat.pie_server:main"

[tool.hatch.build.targets.wheel]
packages = ["bmpchat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
