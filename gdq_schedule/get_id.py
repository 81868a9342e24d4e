import re

# ASCII punctuation, whitespace and apostrophes, including the mis-decoded
# "’" ("â€™") that shows up in tracker text.
_SEPARATORS = re.compile(r"[ !\"#$%&'()*+,\-./:;<=>?@\[\\\]^_`{|}~’â€™]+")
_EDGE_HYPHENS = re.compile(r"(^-+|-+$)")


def get_id(value: str | None = None) -> str:
    """
    Turn a label into a lowercase, hyphen-delimited id.

    ``get_id(" Hello, World! ")`` gives ``"hello-world"``; ``None`` gives ``""``.
    """
    if value is None:
        return ""
    slug = _SEPARATORS.sub("-", str(value).strip())
    return _EDGE_HYPHENS.sub("", slug).lower()
