"""URI normalization and naming helpers."""

import re

API_PREFIX_RE = re.compile(r"^api/(?:v\d+/)?")
PARAM_SEGMENT_RE = re.compile(r"^\{.*\}$")

NormalizedPath = tuple[str, ...]

IRREGULAR = {
    "people": "person",
    "men": "man",
    "women": "woman",
    "children": "child",
    "teeth": "tooth",
    "feet": "foot",
    "mice": "mouse",
    "geese": "goose",
    "indices": "index",
    "matrices": "matrix",
    "vertices": "vertex",
    "criteria": "criterion",
    "analyses": "analysis",
    "leaves": "leaf",
    "lives": "life",
    "wives": "wife",
    "knives": "knife",
    "movies": "movie",
    "cookies": "cookie",
    "statuses": "status",
    "aliases": "alias",
    "buses": "bus",
    "quizzes": "quiz",
}

UNCOUNTABLE = {
    "data", "equipment", "information", "rice", "money", "series", "species",
    "news", "fish", "sheep", "deer", "feedback", "media", "metadata",
}

# (suffix, replacement), first match wins
SUFFIX_RULES = [
    ("ies", "y"),
    ("sses", "ss"),
    ("shes", "sh"),
    ("ches", "ch"),
    ("xes", "x"),
    ("ss", "ss"),
    ("us", "us"),
    ("is", "is"),
    ("s", ""),
]


def strip_api_prefix(uri: str) -> str:
    """Remove the leading slash, ``api/`` and an optional ``v<digits>/`` segment."""
    return API_PREFIX_RE.sub("", uri.lstrip("/"))


def normalize_uri(uri: str) -> NormalizedPath:
    """Turn a route URI into its folder path.

    >>> normalize_uri("api/v1/users/{user}/posts/")
    ('users', 'posts')
    """
    stripped = strip_api_prefix(uri)
    if stripped in ("api", "api/"):
        stripped = ""
    return tuple(s for s in stripped.split("/") if s and not PARAM_SEGMENT_RE.match(s))


def ucfirst(value: str) -> str:
    return value[:1].upper() + value[1:]


def singularize(word: str) -> str:
    """Return the English singular of ``word``, keeping its first-letter case.

    Only the last part of a ``-`` or ``_`` separated word is changed.
    """
    for sep in ("-", "_"):
        if sep in word:
            head, _, tail = word.rpartition(sep)
            return f"{head}{sep}{singularize(tail)}"

    lower = word.lower()
    if not lower or lower in UNCOUNTABLE:
        return word

    if lower in IRREGULAR:
        singular = IRREGULAR[lower]
    else:
        singular = lower
        for suffix, replacement in SUFFIX_RULES:
            if lower.endswith(suffix) and len(lower) > len(suffix):
                singular = lower[: -len(suffix)] + replacement
                break

    if word[0].isupper():
        singular = ucfirst(singular)
    # Keep the original spelling of the unchanged stem (e.g. camelCase)
    common = len(singular)
    while common and word[:common].lower() != singular[:common].lower():
        common -= 1
    return word[:common] + singular[common:]


def folder_name(segment: str) -> str:
    """Display name of the folder created for a path segment."""
    return singularize(ucfirst(segment))


def item_name(path: NormalizedPath, uri: str, handler_method: str) -> str:
    """Display name of a request: last path segment plus the handler method.

    An empty path (root API route) is named after the raw URI instead.
    """
    label = path[-1] if path else uri.strip("/") or "Root"
    return f"{ucfirst(label)} {ucfirst(handler_method)}"
