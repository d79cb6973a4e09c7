"""Structured script text builder.

Scripts are assembled as an ordered list of sections (groups of lines) and
rendered once at the end, with exactly one blank line between sections.
"""


class ScriptBuilder:
    """Accumulate script sections and render them as text.

    Example:
        >>> builder = ScriptBuilder()
        >>> builder.section("#!/usr/bin/env bash", "set -e")
        >>> builder.section('echo "done"')
        >>> builder.render()
        '#!/usr/bin/env bash\\nset -e\\n\\necho "done"\\n'
    """

    def __init__(self) -> None:
        """Initialize an empty builder."""
        self._sections: list[list[str]] = []

    def section(self, *lines: str) -> None:
        """Start a new section with the given lines."""
        self._sections.append(list(lines))

    def extend(self, lines: list[str] | tuple[str, ...]) -> None:
        """Append lines to the current section, starting one if needed."""
        if not self._sections:
            self._sections.append([])
        self._sections[-1].extend(lines)

    @property
    def section_count(self) -> int:
        """Return the number of non-empty sections."""
        return sum(1 for section in self._sections if section)

    def render(self) -> str:
        """Render all non-empty sections to script text ending in a newline."""
        blocks = ["\n".join(section) for section in self._sections if section]
        return "\n\n".join(blocks) + "\n"


def shell_quote(value: str) -> str:
    """Quote a value as a single-quoted POSIX shell word.

    Always quotes, so 'git' renders as ``'git'``.
    """
    return "'" + value.replace("'", "'\\''") + "'"


def powershell_quote(value: str) -> str:
    """Quote a value as a single-quoted PowerShell string literal."""
    return "'" + value.replace("'", "''") + "'"


def comment_text(value: str) -> str:
    """Collapse whitespace so a value cannot break out of a comment line."""
    return " ".join(value.split())
