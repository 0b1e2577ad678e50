#!/usr/bin/env python3
"""
xorcrack - XOR cryptanalysis from the command line

Encodes/decodes base-16 and base-64 and breaks single-byte and repeating-key
XOR by English letter-frequency analysis.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from xorcrack.__version__ import __version__
from xorcrack.config import AnalysisConfig
from xorcrack.detectors.xor_analyzer import XORAnalyzer
from xorcrack.error_handling import XorCrackError, create_error, get_error_handler
from xorcrack.formatter import OutputFormatter
from xorcrack.input_handler import FORMATS, InputHandler
from xorcrack.utils.codec import (
    decode_base16,
    decode_base64,
    encode_base16,
    encode_base64,
)
from xorcrack.utils.xor_tools import repeating_key_xor, xor


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation"""
    parser = argparse.ArgumentParser(
        prog='xorcrack',
        description='Break single-byte and repeating-key XOR, and convert hex/base64',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
QUICK START:

  Break single-byte XOR:
    xorcrack break-single 1b37373331363f78151b7f2b783431333d78397828372d363c78373e783a393b3736

  Find the single-byte XOR line in a file of hex lines:
    xorcrack detect-single 4.txt

  Break repeating-key XOR (base64 file):
    xorcrack break-repeating 6.txt

  Encrypt with a repeating key:
    echo -n "Burning 'em" | xorcrack encrypt --key ICE
        """
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--debug', action='store_true', default=None,
                        help='Verbose logging and tracebacks on error')
    parser.add_argument('--max-key-length', type=int, metavar='N',
                        help='Longest repeating key to consider (default: 40)')
    parser.add_argument('--output', '-o', type=str, metavar='FILE',
                        help='Write results to FILE instead of stdout')

    sub = parser.add_subparsers(dest='command', metavar='COMMAND')
    sub.required = True

    encode = sub.add_parser('encode', help='Encode text as hex or base64')
    encode.add_argument('format', choices=FORMATS)
    encode.add_argument('text', nargs='?', help='Text to encode (default: stdin)')

    decode = sub.add_parser('decode', help='Decode hex or base64 to text')
    decode.add_argument('format', choices=FORMATS)
    decode.add_argument('text', nargs='?', help='Encoded text (default: stdin)')

    xor_cmd = sub.add_parser('xor', help='XOR two hex strings')
    xor_cmd.add_argument('a', metavar='HEX_A')
    xor_cmd.add_argument('b', metavar='HEX_B')

    encrypt = sub.add_parser('encrypt', help='Repeating-key XOR text, print hex')
    encrypt.add_argument('--key', '-k', required=True, help='Key text')
    encrypt.add_argument('text', nargs='?', help='Plaintext (default: stdin)')

    single = sub.add_parser('break-single', help='Break single-byte XOR of a hex string')
    single.add_argument('ciphertext', nargs='?', metavar='HEX',
                        help='Hex ciphertext (default: stdin)')
    single.add_argument('--top', type=int, metavar='N',
                        help='List the N best keys instead of only the best')

    detect = sub.add_parser('detect-single',
                            help='Find the single-byte XOR line in a file of hex lines')
    detect.add_argument('file', nargs='?', help='File with one hex ciphertext per line')

    for name, help_text in (('keylen', 'Estimate repeating-key length'),
                            ('break-repeating', 'Break repeating-key XOR')):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument('file', nargs='?', help='Ciphertext file (default: stdin)')
        cmd.add_argument('--format', '-f', choices=FORMATS, default='base64',
                         help='Ciphertext encoding (default: base64)')

    return parser


def run(args: argparse.Namespace, config: AnalysisConfig, input_handler: InputHandler) -> str:
    """Execute the parsed command and return its output text"""
    analyzer = XORAnalyzer(config)
    formatter = OutputFormatter(config)

    if args.command == 'encode':
        data = input_handler.read_text(value=args.text).encode('utf-8')
        return encode_base16(data) if args.format == 'hex' else encode_base64(data)

    if args.command == 'decode':
        text = input_handler.read_text(value=args.text).strip()
        data = decode_base16(text) if args.format == 'hex' else decode_base64(text)
        return data.decode('utf-8', errors='replace')

    if args.command == 'xor':
        return encode_base16(xor(decode_base16(args.a), decode_base16(args.b)))

    if args.command == 'encrypt':
        key = args.key.encode('utf-8')
        if not key:
            raise create_error("invalid_key", key=args.key)
        data = input_handler.read_text(value=args.text).encode('utf-8')
        return encode_base16(repeating_key_xor(data, key))

    if args.command == 'break-single':
        ciphertext = decode_base16(input_handler.read_text(value=args.ciphertext).strip())
        if args.top:
            return formatter.format_ranking(analyzer.rank_single_byte_keys(ciphertext, args.top))
        return formatter.format_single_byte(analyzer.break_single_byte(ciphertext))

    if args.command == 'detect-single':
        lines = input_handler.read_lines(args.file)
        detection = analyzer.detect_single_byte_xor(decode_base16(line) for line in lines)
        return formatter.format_detection(detection)

    if args.command == 'keylen':
        ciphertext = input_handler.read_ciphertext(args.file, args.format)
        return formatter.format_key_length(analyzer.estimate_key_length(ciphertext))

    if args.command == 'break-repeating':
        ciphertext = input_handler.read_ciphertext(args.file, args.format)
        return formatter.format_repeating_key(analyzer.break_repeating_key(ciphertext))

    raise ValueError(f"Unknown command: {args.command}")


def write_output(output: str, output_path: Optional[str] = None):
    """
    Write the output to the specified destination.

    Args:
        output: Formatted result
        output_path: Optional file path to write to (None = stdout)

    Raises:
        IOError: If output file cannot be written
    """
    if output_path:
        try:
            Path(output_path).write_text(output + '\n', encoding='utf-8')
            print(f"Results written to {output_path}", file=sys.stderr)
        except OSError as e:
            raise IOError(f"Cannot write to output file: {output_path}") from e
    else:
        print(output)


def main(argv: Optional[List[str]] = None, input_handler: Optional[InputHandler] = None) -> int:
    """Main entry point for the xorcrack CLI"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = AnalysisConfig.from_env().with_overrides(
            max_key_length=args.max_key_length,
            debug=args.debug,
        )
        handler = get_error_handler(debug_mode=config.debug)
        output = run(args, config, input_handler or InputHandler())
        write_output(output, args.output)
    except XorCrackError as e:
        get_error_handler().handle_error(e)
        return 1
    except IOError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130

    handler.logger.debug("Command %s finished", args.command)
    return 0


if __name__ == '__main__':
    sys.exit(main())
