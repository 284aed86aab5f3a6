from page_styles.protocol.errors import InputError, OutputError, PreprocessError
from page_styles.protocol.host import load_input, parse_input, write_output

__all__ = [
    "InputError",
    "OutputError",
    "PreprocessError",
    "load_input",
    "parse_input",
    "write_output",
]
