"""Shell metacharacter sanitization."""

# Characters with special meaning to POSIX shells, plus line breaks.
HAZARDOUS_CHARACTERS = frozenset(";$`|&><'\"\\*?[]()!~#\r\n")

PLACEHOLDER = "_"


def sanitize_for_shell(name: str, placeholder: str = PLACEHOLDER) -> str:
    """Replace every hazardous shell character in ``name`` with ``placeholder``.

    Only ever call this on a single path component: it knows nothing about
    path separators.
    """
    return "".join(placeholder if char in HAZARDOUS_CHARACTERS else char for char in name)
