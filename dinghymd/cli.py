"""
# Dinghy-Markdown: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import os
import re
import sys
from typing import Optional

from dinghymd._version import __version__
from dinghymd.constants import COMMAND_LINE_ERROR_EXIT_CODE, GENERIC_ERROR_EXIT_CODE
from dinghymd.core import markdown_to_html

DESCRIPTION = '''
    Convert Markdown to HTML.
'''
MD_FILE_NAME_HELP = '''
    name of Markdown file to be converted
    (can be abbreviated as `file` or `file.`)
'''
ALL_MODE_HELP = '''
    convert all Markdown files under the working directory
'''
LEAD_FILE_NAME_HELP = '''
    name of a Markdown file to be prepended (as the lead) to every file converted
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every replacement applied)
'''


def is_md_file(file_name: str) -> bool:
    return file_name.endswith('.md')


def extract_md_name(md_file_name_argument: str) -> str:
    """
    Extract name-without-extension from a Markdown file name argument.

    The argument may be of the form `«md_name».md`, `«md_name».`, or `«md_name»`,
    and is normalised by resolving `./` and `../`.
    """
    return re.sub(
        pattern=r'[.](md)? \Z',
        repl='',
        string=os.path.normpath(md_file_name_argument),
        flags=re.VERBOSE,
    )


def parse_command_line_arguments() -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-a', '--all',
        dest='all_mode_enabled',
        action='store_true',
        help=ALL_MODE_HELP,
    )
    argument_parser.add_argument(
        '-l', '--lead',
        dest='lead_file_name',
        default=None,
        help=LEAD_FILE_NAME_HELP,
        metavar='lead.md',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'md_file_name_arguments',
        default=[],
        help=MD_FILE_NAME_HELP,
        metavar='file.md',
        nargs='*',
    )

    parsed_arguments = argument_parser.parse_args()
    if parsed_arguments.all_mode_enabled and parsed_arguments.md_file_name_arguments:
        argument_parser.error('argument -a/--all: not allowed with file arguments')

    return parsed_arguments


def collect_md_names(parsed_arguments: argparse.Namespace) -> list[str]:
    """
    Collect the names (without extension) of the Markdown files to be converted.

    In all mode, every `.md` file under the working directory is collected, save the lead file.
    """
    if not parsed_arguments.all_mode_enabled:
        return [
            extract_md_name(md_file_name_argument)
            for md_file_name_argument in parsed_arguments.md_file_name_arguments
        ]

    lead_md_name = None
    if parsed_arguments.lead_file_name is not None:
        lead_md_name = extract_md_name(parsed_arguments.lead_file_name)

    md_names = [
        extract_md_name(os.path.join(path, file_name))
        for path, _, file_names in os.walk(os.curdir)
        for file_name in file_names
        if is_md_file(file_name)
    ]

    return sorted(md_name for md_name in md_names if md_name != lead_md_name)


def read_lead(lead_file_name: Optional[str]) -> str:
    if lead_file_name is None:
        return ''

    with open(lead_file_name, 'r', encoding='utf-8') as lead_file:
        return lead_file.read()


def convert_md_file(md_name: str, lead: str, verbose_mode_enabled: bool) -> str:
    """
    Convert `«md_name».md` (preceded by the lead) to `«md_name».html`.

    Returns the name of the HTML file written.
    """
    with open(f'{md_name}.md', 'r', encoding='utf-8') as md_file:
        content = md_file.read()

    html = markdown_to_html(lead + content, verbose_mode_enabled)

    html_file_name = f'{md_name}.html'
    with open(html_file_name, 'w', encoding='utf-8') as html_file:
        html_file.write(html)

    return html_file_name


def main():
    parsed_arguments = parse_command_line_arguments()

    try:
        lead = read_lead(parsed_arguments.lead_file_name)
        for md_name in collect_md_names(parsed_arguments):
            html_file_name = convert_md_file(md_name, lead, parsed_arguments.verbose_mode_enabled)
            print(f'success: wrote to `{html_file_name}`')
    except FileNotFoundError as file_not_found_error:
        print(f'error: file `{file_not_found_error.filename}` not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except OSError as os_error:
        print(f'error: cannot access `{os_error.filename}`: {os_error.strerror}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


if __name__ == '__main__':
    main()
