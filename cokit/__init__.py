"""Small building blocks: dumps, logging, generators, value wrappers, async streams and combinators."""

__version__ = "0.1.0"

__all__ = [
    "arena",
    "combinators",
    "debug",
    "generator",
    "hexdump",
    "optional",
    "oscheck",
    "rbtree",
    "reflect",
    "streams",
    "tinylog",
    "uniqueptr",
    "variant",
]