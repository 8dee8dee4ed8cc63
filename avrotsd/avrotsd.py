"""

Command line utility to convert Avro schema files to TypeScript declarations.

"""

# pylint: disable=broad-exception-caught

import argparse
import json
import logging
import os
import sys
from avrotsd import _version

ARG_TYPES = {'str': str, 'int': int}


def load_commands():
    """Load the commands from the commands.json file."""
    commands_path = os.path.join(os.path.dirname(__file__), 'commands.json')
    with open(commands_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def create_subparsers(subparsers, commands):
    """Create subparsers for the commands."""
    for command in commands:
        cmd_parser = subparsers.add_parser(command['command'], help=command['description'])
        for arg in command['args']:
            kwargs = {
                'help': arg['help'],
            }
            if 'nargs' in arg:
                kwargs['nargs'] = arg['nargs']
            if 'choices' in arg:
                kwargs['choices'] = arg['choices']
            if 'default' in arg:
                kwargs['default'] = arg['default']
            if arg['type'] == 'bool':
                kwargs['action'] = 'store_true'
            else:
                kwargs['type'] = ARG_TYPES[arg['type']]
            carg = cmd_parser.add_argument(arg['name'], **kwargs)
            if arg['name'].startswith('-'):
                carg.required = arg.get('required', True)


def dynamic_import(module, func):
    """Dynamically import a module and function."""
    mod = __import__(module, fromlist=[func])
    return getattr(mod, func)


def build_function_args(command, args, input_file_path):
    """Map the parsed arguments onto the keyword arguments of the command function."""
    func_args = {}
    for arg, val in command['function']['args'].items():
        if val == 'input_file_path':
            func_args[arg] = input_file_path
        elif val.startswith('args.'):
            if hasattr(args, val[5:]):
                func_args[arg] = getattr(args, val[5:])
        else:
            func_args[arg] = val
    return func_args


def main(argv=None):
    """Main function for the command line utility."""
    commands = load_commands()
    parser = argparse.ArgumentParser(description='Convert Avro schema files to TypeScript interface declarations.')
    parser.add_argument('--version', action='store_true', help='Print the version of avrotsd.')

    subparsers = parser.add_subparsers(dest='command')
    create_subparsers(subparsers, commands)

    args = parser.parse_args(argv)

    if getattr(args, 'version', False):
        print(f'avrotsd {_version.version}')
        return

    if args.command is None:
        parser.print_help()
        return

    if getattr(args, 'verbose', False):
        logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

    try:
        command = next((cmd for cmd in commands if cmd['command'] == args.command), None)
        if not command:
            print(f"Error: Command {args.command} not found.")
            sys.exit(1)

        module_name, func_name = command['function']['name'].rsplit('.', 1)
        func = dynamic_import(module_name, func_name)
        inputs = args.input if isinstance(args.input, list) else [args.input]
        for input_file_path in inputs:
            func(**build_function_args(command, args, input_file_path))
    except Exception as e:
        print("Error: ", str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
