from pymal.reader.parser import Reader, read_all, read_str, tokenize

__all__ = ["Reader", "read_all", "read_str", "tokenize"]
