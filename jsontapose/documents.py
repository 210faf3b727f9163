# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Reading, validating and formatting of JSON and YAML documents."""

import io
import json
import os

import yaml

from .diffing import diff
from .log import (
    DocumentParseError, RootShapeError, BothRequiredError, debug,
)


FORMATS = ("json", "yaml")

ROOT_SHAPE_MESSAGE = "document must be an object at the root level, not an array or primitive"

BOTH_REQUIRED_MESSAGE = "Both input fields are required"


class DocumentLoader(yaml.SafeLoader):
    """Safe YAML loader that keeps timestamps as strings.

    Matches the YAML 1.2 core schema, where dates are plain strings.
    """


DocumentLoader.yaml_implicit_resolvers = {
    first: [r for r in resolvers if r[0] != 'tag:yaml.org,2002:timestamp']
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _reject_constant(name):
    raise ValueError("Unexpected token %s in JSON" % name)


def json_key(key):
    "Convert a mapping key to the string json would use for it."
    if isinstance(key, str):
        return key
    if isinstance(key, bool) or key is None:
        return json.dumps(key)
    return str(key)


def stringify_keys(obj):
    """Convert all mapping keys to the strings json would use.

    Raises ValueError when two keys map to the same string, like
    the yaml keys `1` and `"1"`.
    """
    if isinstance(obj, dict):
        result = {}
        for k, v in obj.items():
            key = json_key(k)
            if key in result:
                raise ValueError('Duplicate key %r after converting keys to strings' % key)
            result[key] = stringify_keys(v)
        return result
    elif isinstance(obj, list):
        return [stringify_keys(v) for v in obj]
    else:
        return obj



def check_format(fmt):
    if fmt not in FORMATS:
        raise ValueError('Not valid value for `fmt`: %r. Valid values are %r' % (fmt, FORMATS))


def detect_format(filename, default="json"):
    "Guess the document format from a filename extension."
    ext = os.path.splitext(filename or "")[1].lower()
    if ext in (".yaml", ".yml"):
        return "yaml"
    if ext == ".json":
        return "json"
    return default


def parse(text, fmt="json", side=None):
    """Parse a JSON or YAML document.

    Raises DocumentParseError with the parser's message on invalid syntax.
    """
    check_format(fmt)
    try:
        if fmt == "json":
            return json.loads(text, parse_constant=_reject_constant)
        return stringify_keys(yaml.load(text, Loader=DocumentLoader))
    except (ValueError, yaml.YAMLError) as e:
        raise DocumentParseError(str(e), side=side)


def validate(text, fmt="json"):
    """Return the parse error message for text, or None if valid.

    Empty or whitespace-only text is considered valid,
    to allow for partial input.
    """
    if not text.strip():
        return None
    try:
        parse(text, fmt)
    except DocumentParseError as e:
        return e.message
    return None


def dumps(value, fmt="json"):
    "Serialize a value with 2-space indentation."
    check_format(fmt)
    if fmt == "json":
        return json.dumps(value, indent=2, ensure_ascii=False)
    return yaml.safe_dump(value, sort_keys=False, allow_unicode=True,
                          default_flow_style=False, indent=2)


def format_document(text, fmt="json"):
    """Pretty-print a document without changing its content.

    Raises DocumentParseError if text is not valid.
    """
    return dumps(parse(text, fmt), fmt)


def read_document(filename, fmt=None, side=None):
    """Read and parse a document from filename or file-like object.

    The format is guessed from the filename if not given. Files that
    cannot be read or are not utf-8 raise DocumentParseError.
    """
    if fmt is None:
        fmt = detect_format(filename if isinstance(filename, str)
                            else getattr(filename, 'name', None))
    try:
        if isinstance(filename, str):
            with io.open(filename, encoding='utf-8') as f:
                text = f.read()
        else:
            text = filename.read()
    except (UnicodeDecodeError, OSError) as e:
        raise DocumentParseError(str(e), side=side)
    return parse(text, fmt, side=side)



def is_root_object(value):
    return isinstance(value, dict)


def compare_documents(left, right):
    """Diff two parsed documents after checking their root shape.

    Raises RootShapeError unless both are mappings.
    """
    for side, value in (("left", left), ("right", right)):
        if not is_root_object(value):
            raise RootShapeError(ROOT_SHAPE_MESSAGE, side=side)
    return diff(left, right)


def compare(left_text, right_text, fmt="json", right_fmt=None):
    """Parse and diff two documents given as text.

    Raises BothRequiredError if either text is blank, DocumentParseError
    for invalid syntax and RootShapeError if a root is not an object.
    """
    if right_fmt is None:
        right_fmt = fmt
    if not left_text.strip() or not right_text.strip():
        raise BothRequiredError(BOTH_REQUIRED_MESSAGE)
    left = parse(left_text, fmt, side="left")
    right = parse(right_text, right_fmt, side="right")
    debug("Comparing %s document against %s document", fmt, right_fmt)
    return compare_documents(left, right)
