"""Minimal inflection helpers used to derive resource types."""

import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def underscore(word: str) -> str:
    """``BlogPost`` -> ``blog_post``."""
    return _CAMEL_BOUNDARY.sub("_", word).replace("-", "_").lower()


def pluralize(word: str) -> str:
    if not word:
        return word
    if re.search(r"[^aeiou]y$", word):
        return word[:-1] + "ies"
    if re.search(r"(s|x|z|ch|sh)$", word):
        return word + "es"
    return word + "s"


def tableize(name: str) -> str:
    """``Article`` -> ``articles``, ``BlogPost`` -> ``blog_posts``."""
    return pluralize(underscore(name))
