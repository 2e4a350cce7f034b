import re

_CAMEL_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_LOWER_UPPER = re.compile(r"([a-z\d])([A-Z])")
_SIBILANT_ENDINGS = ("s", "x", "z", "ch", "sh")


def underscore(name: str) -> str:
    """
    Convert a CamelCase class name to snake_case, dropping any module path.

        underscore("RedisBackedModel") => "redis_backed_model"
        underscore("shop.models.HTTPWidget") => "http_widget"
    """
    name = name.rsplit(".", 1)[-1]
    name = _CAMEL_BOUNDARY.sub(r"\1_\2", name)
    name = _LOWER_UPPER.sub(r"\1_\2", name)
    return name.replace("-", "_").lower()


def pluralize(word: str) -> str:
    """
    English plural by suffix only, no irregular forms.

        pluralize("widget") => "widgets"
        pluralize("false_class") => "false_classes"
        pluralize("category") => "categories"
    """
    if not word:
        return word
    if word.endswith(_SIBILANT_ENDINGS):
        return word + "es"
    if word.endswith("y") and len(word) > 1 and word[-2] not in "aeiou":
        return word[:-1] + "ies"
    return word + "s"
