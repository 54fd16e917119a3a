import re


matchers = {
    "nl": r"\r?\n",  # newline (nl) -- match first so that it doesn't get included in ws
    "ws": r"(?:[^\S\r\n]|\r(?!\n))+",  # whitespace (ws) (except for newlines)
    "word": r"\S+",  # anything else, up to the next whitespace
}

text_groups = ["nl", "ws", "word"]
text_prog = re.compile("|".join(f"({matchers[group]})" for group in text_groups))

paragraph_prog = re.compile(matchers["nl"])


def split_paragraphs(text):
    """Split the text on line breaks ("\\n" or "\\r\\n")."""
    return paragraph_prog.split(text)


def tokenize_text(text):
    """Splits the text in pieces of "nl", "ws" and "word"."""
    pos = 0
    while True:
        match = text_prog.search(text, pos)
        if match is None:
            break
        yield text_groups[match.lastindex - 1], match.group()
        pos = match.end()


def segment_text(text):
    """Split a paragraph in alternating runs of whitespace and non-whitespace.
    Returns a list of strings that join to the original text.
    """
    return [piece for kind, piece in tokenize_text(text) if kind != "nl"]
