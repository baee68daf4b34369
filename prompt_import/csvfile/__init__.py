"""Hand-written CSV tokenizer and writer for topic/prompt files."""

from .parser import parse_csv, tokenize, trim_trailing_blank_rows
from .writer import generate_template, render_records

__all__ = [
    "generate_template",
    "parse_csv",
    "render_records",
    "tokenize",
    "trim_trailing_blank_rows",
]
