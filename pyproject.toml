[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smolrtsp"
version = "0.1.0"
description = "A small RTSP 1.0 server-side toolkit: message serialisation, SDP, RTP and H.264/H.265 NAL packetisation."
requires-python = ">=3.10"
dependencies = []
keywords = ["rtsp", "rtp", "sdp", "h264", "h265", "nal", "streaming"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["smolrtsp"]

[tool.pytest.ini_options]
addopts = "-ra"
