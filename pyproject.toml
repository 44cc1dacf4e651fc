[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treelab"
version = "0.1.0"
description = "Tree and graph structures: BST and AVL dictionaries, prefix expression trees, optimal BSTs and near-shortest routes"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "avl", "expression tree", "optimal bst", "graph", "routes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treelab-bst = "treelab.bst_dict:main"
treelab-prefix = "treelab.prefix_tree:main"
treelab-routes = "treelab.routes:main"
treelab-obst = "treelab.obst:main"
treelab-avl = "treelab.avl_dict:main"

[tool.hatch.build.targets.wheel]
packages = ["treelab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
