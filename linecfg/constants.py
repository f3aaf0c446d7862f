OPEN_MARKER = "<"
CLOSE_MARKER = ">"
PAYLOAD_MARKER = "|"

LINE_TERMINATOR = b"\r\n"
MEMORY_LINE_TERMINATOR = b"\x00"

# Columns of indentation per nesting level in file-backed output
INDENT_WIDTH = 2

# Raw bytes carried by one base64 line
BINARY_CHUNK_SIZE = 40

BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

QUOTE_CHARS = "\"'`"
COMMENT_CHARS = "#;"
