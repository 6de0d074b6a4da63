#!/usr/bin/env python3

import sys
from logging import getLogger, basicConfig
from argparse import ArgumentParser
from os import getenv
from typing import Optional
from converter import convert
from errors import ConvertError, ArgumentError, PathError, DecodeError, EncodeError
from path_helper import canonicalize_path

_logger = getLogger(f'app.{__name__}')

class App():
    input_file: Optional[str]
    output_file: Optional[str]
    cwd: str

    def __init__(self,
                 input_file: Optional[str],
                 output_file: Optional[str],
                 cwd: str = '',
                 log_level: str = 'WARN',
                 ):

        logConfig = {
            'level': log_level,
            'format': '%(asctime)s %(process)d %(levelname)s %(name)s %(message)s',
        }
        basicConfig(**logConfig)

        self.input_file = input_file
        self.output_file = output_file
        self.cwd = cwd

    def run(self):
        if not self.input_file:
            raise ArgumentError('An input file must be specified')
        if not self.output_file:
            raise ArgumentError('An output file must be specified')

        input_path = canonicalize_path(self.cwd, self.input_file)
        output_path = canonicalize_path(self.cwd, self.output_file)
        _logger.info(f'json: {input_path}')
        _logger.info(f'yaml: {output_path}')

        try:
            json_file = open(input_path, 'rb')
        except OSError as error:
            raise PathError('Failed to open input file', error) from error

        with json_file:
            try:
                yaml_file = open(output_path, 'wb')
            except OSError as error:
                raise PathError('Failed to open output file', error) from error

            with yaml_file:
                convert(json_file, yaml_file)

        _logger.info('conversion done')

def main(argv: Optional[list[str]] = None) -> int:
    parser = ArgumentParser(prog='json2yml', description='Convert a JSON file to YAML')
    parser.add_argument('--log-level', type=str, nargs='?', required=False, help='Log Level', default='WARN')
    parser.add_argument('-i', '--input', type=str, required=False, help='The input JSON file')
    parser.add_argument('-o', '--output', type=str, required=False, help='The output YAML file')

    args = parser.parse_args(argv)

    # Set by `bazel run`, the directory the user ran the command from.
    cwd = getenv('BUILD_WORKING_DIRECTORY', '')

    app = App(
        input_file=args.input,
        output_file=args.output,
        cwd=cwd,
        log_level=args.log_level,
    )

    try:
        app.run()
    except (DecodeError, EncodeError) as error:
        print(f'[ERROR]: Failed to perform JSON to YAML conversion: {error}', file=sys.stderr)
        return 1
    except ConvertError as error:
        print(f'[ERROR]: {error}', file=sys.stderr)
        return 1

    return 0

if __name__ == '__main__':
    sys.exit(main())
