[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic graph, search, sorting and backtracking algorithms with small command-line front ends."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graph",
    "a-star",
    "dijkstra",
    "kruskal",
    "prim",
    "dfs",
    "bfs",
    "n-queens",
    "selection-sort",
    "chatbot",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algokit-astar = "algokit.astar:main"
algokit-chatbot = "algokit.chatbot:main"
algokit-traversal = "algokit.traversal:main"
algokit-dijkstra = "algokit.dijkstra:main"
algokit-spanning-tree = "algokit.spanning_tree:main"
algokit-nqueens = "algokit.nqueens:main"
algokit-selection-sort = "algokit.selection_sort:main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
