"""
Argument routing for verb-style invocation
"""
from typing import List, Optional, Sequence

from ...core.logging import get_logger
from .commands import resolve_verb

logger = get_logger(__name__)

# Options of the main callback; each takes a value
GLOBAL_OPTIONS = {"--log-level", "-l", "--log-file", "--data-file", "--config", "-c"}

DEFAULT_VERB = "connect"


def _global_options_end(args: Sequence[str]) -> Optional[int]:
    """
    Index of the first argument after the leading global options.
    
    None when the last option is missing its value.
    """
    index = 0
    while index < len(args):
        token = args[index]
        if token in GLOBAL_OPTIONS:
            if index + 1 >= len(args):
                return None
            index += 2
        elif "=" in token and token.split("=", 1)[0] in GLOBAL_OPTIONS:
            index += 1
        else:
            break
    return index


def normalize_args(args: Sequence[str]) -> List[str]:
    """
    Rewrite raw CLI arguments into a form the typer app understands.
    
    The first argument after global options picks the verb: ``-v`` style
    aliases, ``--add`` style flags and bare ``add`` are all accepted. When
    nothing names a verb the default connect flow runs, and any leftover
    plain words become its filter.
    
    Examples:
        [] -> ["connect"]
        ["--add"] -> ["add"]
        ["-v"] -> ["version"]
        ["--data-file", "x.json", "list"] -> ["--data-file", "x.json", "list"]
        ["prod"] -> ["connect", "prod"]
    """
    args = list(args)
    split = _global_options_end(args)
    if split is None:
        # Leave it to typer to report the missing value
        return args
    head, rest = args[:split], args[split:]
    
    if rest:
        verb = resolve_verb(rest[0])
        if verb is not None:
            return head + [verb] + rest[1:]
    
    words = [token for token in rest if not token.startswith("-")]
    if rest:
        logger.debug("No command in %s, falling back to %s", rest, DEFAULT_VERB)
    return head + [DEFAULT_VERB] + ([" ".join(words)] if words else [])
