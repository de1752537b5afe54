"""Preprocessor that normalises ``\\r\\n`` and ``\\r`` line endings to ``\\n``."""


def normalize_line_endings(text: str, context: dict) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")
