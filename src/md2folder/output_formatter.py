"""Format an expansion result for display."""

from __future__ import annotations

from md2folder.schemas import ExpansionResult


def format_expansion(result: ExpansionResult) -> str:
    """Create a summary followed by the list of files."""
    summary_lines = [
        f"Source: {result.source}",
        f"Folder: {result.folder}",
        f"Documents: {len(result.documents)}",
    ]
    if result.dry_run:
        summary_lines.append("Dry run: nothing was written")

    tree = _create_files_tree(result)
    if not tree:
        return "\n".join(summary_lines)
    return "\n".join(summary_lines) + "\n\nFiles:\n" + tree


def _create_files_tree(result: ExpansionResult, indent: int = 1) -> str:
    lines: list[str] = []
    for path, document in zip(result.files, result.documents):
        line = " " * (indent * 4) + path.name
        # Show the title when the file name no longer matches it.
        if path.stem != document.title:
            line += f"  ({document.title or 'empty title'})"
        lines.append(line)
    return "\n".join(lines)
