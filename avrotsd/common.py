"""
Common utility functions for avrotsd.
"""

# pylint: disable=line-too-long

import json
import os
import re
import textwrap
from typing import Any, List, Optional

import jinja2

# Matches block and line comments, but not the '//' of a URL such as "http://"
JSON_COMMENT_PATTERN = re.compile(r'(?<!:)(/\*[\s\S]*?\*/|//.*)')


def strip_namespace(name: str) -> str:
    """Return the last dot-separated segment of a name."""
    return name.split('.')[-1]


def create_documentation(doc: Optional[str], width: int = 80, indent: str = '') -> str:
    """
    Render a doc string as a block comment.

    The text is word-wrapped so that the part of every line that follows the
    indentation (the ' * ' marker plus the words) fits into ``width``. Words
    are never split; a single word longer than the budget gets a line of its own.

    Args:
        doc (str): The documentation text, may be None.
        width (int): The maximum line width, not counting the indentation.
        indent (str): The prefix placed in front of every comment line.

    Returns:
        str: The comment block followed by a newline, or '' if there is no doc.
    """
    if not doc or not doc.strip():
        return ''
    lines = textwrap.wrap(' '.join(doc.split()), width=max(width - 3, 1),
                          break_long_words=False, break_on_hyphens=False)
    body = '\n'.join(f'{indent} * {line}' for line in lines)
    return f'{indent}/**\n{body}\n{indent} */\n'


def strip_json_comments(text: str) -> str:
    """Remove /* */ and // comments from JSON text."""
    return JSON_COMMENT_PATTERN.sub('', text)


def load_schema_text(text: str) -> Any:
    """Parse Avro schema text that may contain comments."""
    return json.loads(strip_json_comments(text))


def get_files_from_input(input_path: str) -> List[str]:
    """
    Resolve an input path into the list of schema files to convert.

    A file is returned as is. A directory yields the *.avsc files it contains,
    sorted by name.
    """
    if os.path.isdir(input_path):
        return [os.path.join(input_path, name) for name in sorted(os.listdir(input_path))
                if name.endswith('.avsc') and os.path.isfile(os.path.join(input_path, name))]
    if os.path.isfile(input_path):
        return [input_path]
    raise FileNotFoundError(f"Input file or folder {input_path} does not exist")


def process_template(file_path: str, **kvargs) -> str:
    """
    Process a file as a Jinja2 template with the given object as input.

    Args:
        file_path (str): The path to the template, relative to this package.
        kvargs: The values to use as input for the template.

    Returns:
        str: The processed template as a string.
    """
    file_dir = os.path.dirname(__file__)
    template_loader = jinja2.FileSystemLoader(searchpath=file_dir)
    template_env = jinja2.Environment(loader=template_loader)
    template_env.filters['strip_namespace'] = strip_namespace

    template = template_env.get_template(file_path)
    return template.render(**kvargs)
