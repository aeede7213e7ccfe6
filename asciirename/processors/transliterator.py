"""Unicode to ASCII transliteration."""

from collections.abc import Callable

from unidecode import unidecode

from asciirename.errors import TransliterationError


# Filenames are handed to us as str by the OS layer; undecodable bytes are
# carried as lone surrogates and must be restored before UTF-8 decoding.
FILESYSTEM_ENCODING = "utf-8"
FILESYSTEM_ERRORS = "surrogateescape"


FragmentTable = Callable[[str], str]


class Transliterator:
    """Convert UTF-8 encoded names into a best-effort ASCII spelling.

    Each decoded codepoint is looked up in a fragment table which maps it to
    zero or more ASCII characters. Fragments are collected in a growable list,
    so no assumption is made about how far a single codepoint may expand.
    """

    def __init__(self, table: FragmentTable = unidecode) -> None:
        """Initialize the transliterator.

        Args:
            table: Callable mapping a single-codepoint string to its ASCII fragment.
                   Defaults to ``unidecode.unidecode``.
        """
        self.table = table

    def transliterate(self, value: bytes | str) -> str:
        """Transliterate a name to ASCII.

        Invalid or truncated UTF-8 sequences are skipped and decoding resumes
        at the next byte.

        Args:
            value: Raw UTF-8 bytes, or a str as returned by the filesystem.

        Returns:
            The concatenation of the fragments of every decoded codepoint.

        Raises:
            TransliterationError: If the table produced non-ASCII output.
        """
        raw = self._to_bytes(value)
        text = raw.decode("utf-8", errors="ignore")

        fragments = [self.fragment(codepoint) for codepoint in text]
        result = "".join(fragments)

        if not result.isascii():
            raise TransliterationError(text, "transliteration table produced non-ASCII output")

        return result

    def fragment(self, codepoint: str) -> str:
        """Return the ASCII fragment for a single codepoint."""
        if codepoint.isascii():
            return codepoint
        return self.table(codepoint)

    @staticmethod
    def _to_bytes(value: bytes | str) -> bytes:
        if isinstance(value, bytes):
            return value
        return value.encode(FILESYSTEM_ENCODING, errors=FILESYSTEM_ERRORS)

