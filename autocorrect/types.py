"""Map file names and extensions to the supported file types."""

FILE_TYPES = {
    "html": "html",
    "htm": "html",
    "vue": "html",
    "ejs": "html",
    "html.erb": "html",
    "yaml": "yaml",
    "yml": "yaml",
    "rust": "rust",
    "rs": "rust",
    "sql": "sql",
    "ruby": "ruby",
    "rb": "ruby",
    "Gemfile": "ruby",
    "crystal": "ruby",
    "cr": "ruby",
    "elixir": "elixir",
    "ex": "elixir",
    "exs": "elixir",
    "js": "javascript",
    "jsx": "javascript",
    "javascript": "javascript",
    "ts": "javascript",
    "tsx": "javascript",
    "typescript": "javascript",
    "js.erb": "javascript",
    "css": "css",
    "scss": "css",
    "sass": "css",
    "less": "css",
    "json": "json",
    "go": "go",
    "python": "python",
    "py": "python",
    "objective_c": "objective_c",
    "objective-c": "objective_c",
    "m": "objective_c",
    "h": "objective_c",
    "strings": "strings",
    "csharp": "csharp",
    "cs": "csharp",
    "java": "java",
    "scala": "scala",
    "swift": "swift",
    "kotlin": "kotlin",
    "php": "php",
    "dart": "dart",
    "markdown": "markdown",
    "md": "markdown",
    "text": "text",
    "plain": "text",
    "txt": "text",
}


def is_support_type(filename_or_ext: str) -> bool:
    """Return whether *filename_or_ext* is a known type or extension."""
    return filename_or_ext in FILE_TYPES


def get_file_extension(filename: str) -> str:
    """Return the extension of *filename*, or the name itself if it has none."""
    filename = filename.strip()
    if is_support_type(filename):
        return filename

    filename = filename.split("/")[-1]
    parts = filename.split(".")
    ext = parts[-1]

    if len(parts) > 2:
        double_ext = ".".join(parts[-2:])
        if is_support_type(double_ext):
            ext = double_ext
    elif len(parts) < 2:
        ext = filename

    return ext


def match_filename(filename_or_ext: str) -> str:
    """Return the file type for a name or extension, or "" if unsupported."""
    return FILE_TYPES.get(get_file_extension(filename_or_ext), "")