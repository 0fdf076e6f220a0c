from __future__ import annotations

# separator appended after every word in the text buffer
SEPARATOR: str = " "

# Markov context length used when the caller gives none
DEFAULT_ORDER: int = 2

# continuation length drawn from [MIN_WORDS, MAX_WORDS) by the CLI and web app
MIN_WORDS: int = 10
MAX_WORDS: int = 30

# tie sampling strategy: "span" (duplicate span table) or "reservoir"
SAMPLER: str = "span"

# file types to include when a training source is a directory
INCLUDE_EXTS = [".txt"]

# folders to skip
EXCLUDE_DIRS = {".git", ".hg", ".svn", ".idea", ".vscode", "node_modules", "__pycache__"}

# web defaults
HOST: str = "127.0.0.1"
PORT: int = 8000
