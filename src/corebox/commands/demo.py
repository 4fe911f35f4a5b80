from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from rich.console import Console

from corebox.box import Box

logger = logging.getLogger(__name__)

console = Console()


def run_demo(box: Box, skip_fatal: bool = False) -> Box:
    """Walk every facade of ``box`` once, ending with ``fatal`` unless skipped."""
    box.event.on('hello', lambda message: console.print(f"event hello {message}"))
    box.event.emit('hello', 'world')

    console.print(f"id {box.id()}")
    console.print(f"env {box.env}")

    box.log.info('info message')
    box.log.warn('warning message')
    console.print(f"any_error() {box.log.any_error()}")
    box.log.error('error message')
    console.print(f"any_error() {box.log.any_error()}")

    console.print(f"state empty {dict(box.state.read())}")
    box.state.append({'counter': 0})
    console.print(f"state {{'counter': 0}} {dict(box.state.read())}")
    box.state.append({'counter': 1})
    console.print(f"state {{'counter': 1}} {dict(box.state.read())}")
    box.state.append({'name': 'foobar'})
    console.print(f"state {{'counter': 1, 'name': 'foobar'}} {dict(box.state.read())}")
    box.state.reset()
    console.print(f"state was reset {dict(box.state.read())}")

    if skip_fatal:
        logger.info("Fatal step skipped")
        return box

    box.log.fatal('fake fatal error that exits the process')
    console.print('[red]should not be displayed due to above fatal()[/red]')
    return box


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Exercise the corebox facades.')
    parser.add_argument('--profile', type=str, default=None, help='YAML profile with log/event/state sections')
    parser.add_argument('--skip-fatal', action='store_true', help='Do not end the demo with fatal()')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    box = Box.from_profile(args.profile) if args.profile else Box.create()
    run_demo(box, skip_fatal=args.skip_fatal)
    console.print('Demo complete.')


if __name__ == '__main__':
    main()
