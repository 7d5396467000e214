"""Human-readable listings of a directory subtree.

Only the public surface of a directory is used (name, children, listing
values), so any directory policy can be rendered.

Output format:
    > FileSystem
      |-> Cool_Folder
      |-> New_Folder
      |    |-> Strings
      |    |    |-> text.txt
"""

from typing import TYPE_CHECKING, Iterable, List, Optional

from .config import ListingConfig

if TYPE_CHECKING:
    from .core.directory import Directory


def render_listing(directory: "Directory",
                   show_values: bool = True,
                   config: Optional[ListingConfig] = None) -> str:
    """Render the subtree below ``directory`` as text.

    Values are listed before subdirectories at every level. Names starting
    with the hidden prefix are skipped, together with their whole subtree.

    Args:
        directory: Directory to render (its own name becomes the header)
        show_values: List the values each directory holds
        config: Listing style (defaults to ListingConfig())

    Returns:
        Multi-line listing without a trailing newline

    Raises:
        ValueError: If the listing configuration is invalid
    """
    config = config or ListingConfig()
    errors = config.validate()
    if errors:
        raise ValueError(f"Invalid listing configuration: {'; '.join(errors)}")

    lines = [f"{config.root_marker}{directory.get_name()}"]
    _render_level(directory, lines, 0, show_values, config)
    return "\n".join(lines)


def _render_level(directory: "Directory",
                  lines: List[str],
                  level: int,
                  show_values: bool,
                  config: ListingConfig) -> None:
    prefix = config.margin + config.indent * level + config.branch

    if show_values:
        for label in _visible(directory, directory.listing_values(), config):
            lines.append(f"{prefix}{label}")

    for name in _visible(directory, directory.children, config):
        lines.append(f"{prefix}{name}")
        _render_level(directory.children[name], lines, level + 1, show_values, config)


def _visible(directory: "Directory", names: Iterable[str], config: ListingConfig) -> List[str]:
    visible = [name for name in names
               if config.show_hidden or not directory.naming.is_hidden(name)]
    if config.sort_entries:
        visible.sort()
    return visible


__all__ = ['render_listing']
