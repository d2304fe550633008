[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grafolab"
version = "0.1.0"
description = "Small graph tools: BFS distances, DFS traces, path queries, bipartite and triangle checks, Bacon numbers"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "bfs", "dfs", "bipartite", "triangle", "bacon-number"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grafolab-graph = "grafolab.graph:main"
grafolab-connectivity = "grafolab.connectivity:main"
grafolab-triangles = "grafolab.triangles:main"
grafolab-bipartite = "grafolab.bipartite:main"
grafolab-bacon = "grafolab.bacon:main"
grafolab-fields = "grafolab.fields:main"

[tool.hatch.build.targets.wheel]
packages = ["grafolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
