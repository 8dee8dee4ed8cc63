import json
import os
import shutil
import tempfile
import unittest

import pytest

from avrotsd.common import (create_documentation, get_files_from_input, load_schema_text, process_template,
                            strip_json_comments, strip_namespace)


class TestStripNamespace(unittest.TestCase):

    def test_strip_namespace(self):
        self.assertEqual(strip_namespace("com.example.Address"), "Address")
        self.assertEqual(strip_namespace("Address"), "Address")
        self.assertEqual(strip_namespace("null | undefined"), "null | undefined")


class TestCreateDocumentation(unittest.TestCase):

    def test_no_doc(self):
        self.assertEqual(create_documentation(None), '')
        self.assertEqual(create_documentation(''), '')
        self.assertEqual(create_documentation('   '), '')

    def test_short_doc(self):
        self.assertEqual(create_documentation("Hello world", 80, '\t'), "\t/**\n\t * Hello world\n\t */\n")

    def test_wrapping(self):
        doc = "The quick brown fox jumps over the lazy dog and keeps running through the field until dusk"
        result = create_documentation(doc, 30, '  ')
        lines = result.splitlines()
        self.assertEqual(lines[0], "  /**")
        self.assertEqual(lines[-1], "   */")
        body = lines[1:-1]
        self.assertGreater(len(body), 1)
        for line in body:
            self.assertTrue(line.startswith("   * "))
            self.assertLessEqual(len(line) - 2, 30)
        self.assertEqual(" ".join(line[5:] for line in body), doc)

    def test_long_word_is_not_split(self):
        word = "x" * 50
        result = create_documentation(f"short {word} tail", 20)
        self.assertIn(f" * {word}\n", result)

    def test_whitespace_is_collapsed(self):
        self.assertEqual(create_documentation("multi\nline\tdoc"), "/**\n * multi line doc\n */\n")


class TestSchemaText(unittest.TestCase):

    def test_strip_comments(self):
        text = '// heading\n{"type": /* inline */ "enum", "doc": "see http://example.com"}'
        self.assertEqual(json.loads(strip_json_comments(text)), {"type": "enum", "doc": "see http://example.com"})

    def test_load_schema_text(self):
        schema = load_schema_text('{\n  // the name\n  "type": "enum", "name": "E", "symbols": ["A"]\n}')
        self.assertEqual(schema["name"], "E")

    def test_load_invalid_text(self):
        with pytest.raises(json.JSONDecodeError):
            load_schema_text('{"type": ')


class TestGetFilesFromInput(unittest.TestCase):

    def setUp(self):
        self.folder = os.path.join(tempfile.gettempdir(), "avrotsd", "files-from-input")
        if os.path.exists(self.folder):
            shutil.rmtree(self.folder, ignore_errors=True)
        os.makedirs(os.path.join(self.folder, "sub.avsc"), exist_ok=True)
        for name in ["b.avsc", "a.avsc", "readme.md"]:
            with open(os.path.join(self.folder, name), 'w', encoding='utf-8') as file:
                file.write("{}")

    def test_folder(self):
        self.assertEqual(get_files_from_input(self.folder),
                         [os.path.join(self.folder, "a.avsc"), os.path.join(self.folder, "b.avsc")])

    def test_file(self):
        path = os.path.join(self.folder, "readme.md")
        self.assertEqual(get_files_from_input(path), [path])

    def test_missing(self):
        with pytest.raises(FileNotFoundError):
            get_files_from_input(os.path.join(self.folder, "missing"))


class TestProcessTemplate(unittest.TestCase):

    def test_enum_template(self):
        result = process_template("avrotots/enum.ts.jinja", doc='', name="com.example.Color", body="\tRED = 'RED'")
        self.assertEqual(result, "export enum Color {\n\tRED = 'RED'\n}")


if __name__ == '__main__':
    unittest.main()
