"""File extension → language tag lookup."""

from __future__ import annotations

from pathlib import PurePosixPath

_LANGUAGES: dict[str, str] = {
    "ts": "typescript",
    "tsx": "typescript",
    "js": "javascript",
    "jsx": "javascript",
    "py": "python",
    "java": "java",
    "go": "go",
    "rs": "rust",
    "cpp": "cpp",
    "c": "c",
    "cs": "csharp",
    "php": "php",
    "rb": "ruby",
    "swift": "swift",
    "kt": "kotlin",
    "scala": "scala",
    "sql": "sql",
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
    "xml": "xml",
    "html": "html",
    "css": "css",
    "scss": "scss",
    "md": "markdown",
    "sh": "shell",
    "dockerfile": "dockerfile",
}

_BARE_FILENAMES = {"dockerfile": "dockerfile", "makefile": "makefile"}


def language_from_path(path: str) -> str:
    """Return the language tag for *path*, ``"text"`` when unknown."""
    name = PurePosixPath(path).name.lower()
    if "." not in name:
        return _BARE_FILENAMES.get(name, "text")
    ext = name.rsplit(".", 1)[1]
    return _LANGUAGES.get(ext, "text")
