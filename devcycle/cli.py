import argparse
import sys

from rich.text import Text

from devcycle.core.command_types import Profile
from devcycle.core.service import DevCycleService
from devcycle.core.shell_interface import INTERRUPTED
from devcycle.errors import DevCycleError
from devcycle.output.console import CONSOLE
from devcycle.output.styles import Style
from devcycle.version import get_version

USAGE_ERROR = 2


def make_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='devcycle',
        description='Development environment lifecycle: build, up, down, watch, test, test-standalone',
    )
    parser.add_argument('operation',
                        nargs='?',
                        help='Operation to run')
    parser.add_argument('--version',
                        action='version',
                        version=f'%(prog)s {get_version()}')

    group = parser.add_argument_group('Environment')
    group.add_argument('-p', '--profile',
                       choices=Profile.builtin_names(),
                       help='Built-in operations profile [database by default]')
    group.add_argument('-f', '--file',
                       help='YAML operations file, replaces built-in profile')
    group.add_argument('-l', '--list',
                       action='store_true',
                       help='List operations of chosen profile')
    group.add_argument('-n', '--dry-run',
                       action='store_true',
                       help="Print commands, don't run them")
    group.add_argument('-q', '--quiet',
                       action='store_true',
                       default=None,
                       help="Don't echo commands")
    return parser


def main(argv: list[str] = None, service_maker=DevCycleService) -> int:
    parser = make_arg_parser()
    args = parser.parse_args(argv)

    if not args.list and not args.operation:
        parser.print_usage(sys.stderr)
        CONSOLE.print(Text('devcycle: no operation given', style=Style.bad))
        return USAGE_ERROR

    try:
        service = service_maker(profile=args.profile, operations_file=args.file, quiet=args.quiet)

        if args.list:
            service.print_operations()
            return 0

        if args.dry_run:
            service.print_plan(args.operation)
            return 0

        report = service.run(args.operation)
    except DevCycleError as e:
        CONSOLE.print(Text(f'devcycle: {e}', style=Style.bad))
        return USAGE_ERROR
    except KeyboardInterrupt:
        CONSOLE.print(Text(f'devcycle: *** [{args.operation}] Interrupted', style=Style.bad))
        return INTERRUPTED

    if not report.succeeded:
        CONSOLE.print(Text(f'devcycle: *** [{report.operation}] Error {report.exit_code}', style=Style.bad))
    return report.exit_code


def run() -> None:
    sys.exit(main())
