"""
Part of marcdump
Copyright (c) 2026 marcdump contributors
MIT License https://opensource.org/licenses/mit-license.php
Code policy PEP8 https://www.python.org/dev/peps/pep-0008/
"""

""" Errors stopping a dump. Missing fields are not errors, the matcher
answers False for them.
"""


class MarcDumpError(Exception):
    """Base of all fatal errors, main() turns them into exit code 1"""


class UsageError(MarcDumpError):
    """Bad command line"""


class OpenError(MarcDumpError):
    """Input file can't be opened"""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot open \"{path}\": {reason}")


class InvalidSelectorSpec(MarcDumpError):
    """Selector text is not FIELD[_SUBFIELD][=PATTERN]"""

    def __init__(self, text, message=None):
        self.text = text
        if message is None:
            message = f"invalid selector \"{text}\", expected FIELD[_SUBFIELD][=PATTERN]"
        super().__init__(message)


class PatternCompileError(MarcDumpError):
    """Pattern part of a selector is not a valid regular expression"""

    def __init__(self, pattern, cause):
        self.pattern = pattern
        self.cause = cause
        super().__init__(f"bad pattern \"{pattern}\": {cause}")


class DecodeError(MarcDumpError):
    """A record can't be decoded, the rest of the stream can't be trusted"""

    def __init__(self, position, cause):
        # 1-based position of the record in the file
        self.position = position
        self.cause = cause
        super().__init__(f"record {position}: {cause}")


class IndexNotSupported(MarcDumpError):
    """Building an index file is declared on the command line, not done"""

    def __init__(self, index_file):
        self.index_file = index_file
        super().__init__(f"cannot build index \"{index_file}\", indexing is not implemented")
