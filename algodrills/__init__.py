"""Algorithm and data-structure drills: containers, searches, recursion, sorting, DP and greedy."""

__version__ = "0.1.0"

__all__ = [
    "warmup",
    "arrays",
    "linked_list",
    "stacks",
    "queues",
    "deques",
    "brackets",
    "grids",
    "recursion",
    "backtracking",
    "simulation",
    "sorting",
    "dynamic",
    "greedy",
]