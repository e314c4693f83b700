"""CLI for occi-render."""

import argparse
import logging
import sys

from occi_render.domain.infrastructure import KINDS, default_categories
from occi_render.domain.models import RenderOptions
from occi_render.renderer import JSONRenderer
from occi_render.resolution.location_registry import LocationRegistry


class StdoutSink:
    """Response sink writing the body to a text stream; always succeeds."""

    def __init__(self, stream=None, status: int = 200) -> None:
        self._stream = stream or sys.stdout
        self._status = status

    def status(self) -> int:
        return self._status

    def write(self, body: bytes) -> None:
        self._stream.write(body.decode('utf-8'))
        self._stream.write('\n')


def render_categories(options: RenderOptions, stream=None) -> bool:
    """Render the built-in category listing to ``stream``."""
    renderer = JSONRenderer(LocationRegistry(), options)
    renderer.prepare_renderer()
    # Reversed so the listing reads in registration order after prepending
    renderer.render_category_type(reversed(default_categories()))
    return renderer.render_response(StdoutSink(stream))


def main(argv=None):
    parser = argparse.ArgumentParser(prog='occi-render', description='OCCI JSON renderer')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command')

    # categories command
    categories_parser = subparsers.add_parser('categories', help='Render the built-in category listing')
    categories_parser.add_argument('--no-pretty', action='store_true', help='Disable pretty printing')

    # kinds command
    subparsers.add_parser('kinds', help='List built-in kind type identifiers')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    if args.command == 'categories':
        render_categories(RenderOptions(pretty=not args.no_pretty))

    elif args.command == 'kinds':
        for type_identifier in sorted(kind.type_identifier for kind in KINDS):
            print(f"  {type_identifier}")

    else:
        parser.print_help()


if __name__ == '__main__':
    main()
