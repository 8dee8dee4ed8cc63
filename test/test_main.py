import argparse
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

import pytest

from avrotsd.avrotsd import main


def get_avsc(name='person'):
    """Provides the Avro input file path."""
    return os.path.join(os.path.dirname(__file__), 'avsc', f'{name}.avsc')


def get_out_dir(name):
    """Provides an empty output folder."""
    out_dir = os.path.join(tempfile.gettempdir(), 'avrotsd', name)
    if os.path.exists(out_dir):
        shutil.rmtree(out_dir, ignore_errors=True)
    return out_dir


class TestMain(unittest.TestCase):

    @patch('argparse.ArgumentParser.parse_args', return_value=argparse.Namespace(command=None, version=False))
    def test_main_no_command(self, mock_parse_args):
        """Test main function with no command."""
        with patch('argparse.ArgumentParser.print_help') as mock_help:
            main()
        mock_help.assert_called_once()

    def test_main_version(self):
        """Test the --version flag."""
        with patch('builtins.print') as mock_print:
            main(['--version'])
        self.assertTrue(mock_print.call_args[0][0].startswith('avrotsd '))

    def test_main_a2tsd_command(self):
        """Test main function with a2tsd command and several inputs."""
        out_dir = get_out_dir('cli')
        main(['a2tsd', get_avsc('person'), get_avsc('color'), '--out', out_dir])
        assert os.path.exists(os.path.join(out_dir, 'person.ts'))
        assert os.path.exists(os.path.join(out_dir, 'color.ts'))

    @patch('argparse.ArgumentParser.parse_args',
           return_value=argparse.Namespace(command='a2tsd', version=False, input=[get_avsc('order')],
                                           out=os.path.join(tempfile.gettempdir(), 'avrotsd', 'cli-verbose'), verbose=True))
    def test_main_a2tsd_verbose(self, mock_parse_args):
        """Test main function with the verbose flag."""
        with patch('builtins.print') as mock_print:
            main()
        printed = mock_print.call_args[0][0]
        self.assertIn('export interface IOrder {', printed)
        self.assertIn('is written to order.ts', printed)

    def test_main_missing_input(self):
        """Errors are reported and end the process with status 1."""
        with patch('builtins.print') as mock_print:
            with pytest.raises(SystemExit) as exit_info:
                main(['a2tsd', os.path.join(tempfile.gettempdir(), 'avrotsd', 'nothing-here.avsc')])
        self.assertEqual(exit_info.value.code, 1)
        self.assertEqual(mock_print.call_args[0][0], 'Error: ')


if __name__ == '__main__':
    unittest.main()
