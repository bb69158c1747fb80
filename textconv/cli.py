#!/usr/bin/env python3
import argparse
import dataclasses
import logging
import sys
import time

import pyperclip

from .config import load_env, load_options, setup_logging
from .core import BIT_WIDTHS, HEX_CASES
from .errors import ConversionError
from .modes import CodecMode, convert
from .tables import EMOJI_PRESETS

logger = logging.getLogger(__name__)

CODECS = ('binary', 'base64', 'morse', 'ascii', 'hex', 'emoji')


# ---------- Helpers ----------
def read_input(value):
    if value is None or value == '-':
        return sys.stdin.read().rstrip('\n')
    return value

def build_options(args):
    overrides = {}
    if getattr(args, 'bits', None) is not None:
        overrides['binary_bit_width'] = args.bits
    if getattr(args, 'case', None) is not None:
        overrides['hex_case'] = args.case
    if getattr(args, 'preset', None) is not None:
        overrides['emoji_preset'] = args.preset
    return dataclasses.replace(load_options(args.env_file), **overrides)

def default_filename(mode: CodecMode) -> str:
    return f"converted_{mode.target}_{int(time.time() * 1000)}.txt"

def save_to_file(data, filename):
    try:
        with open(filename, 'w', encoding='utf-8') as f:
            f.write(data)
    except OSError as e:
        raise SystemExit(f"error: failed to write to file '{filename}': {e}")
    return f"Saved to {filename}"

def copy_to_clipboard(data):
    try:
        pyperclip.copy(data)
        return "Copied to clipboard!"
    except pyperclip.PyperclipException as e:
        logger.debug("clipboard unavailable: %s", e)
        return "Clipboard copy failed. (pyperclip may not be supported in this environment)"

def show_stats(text, result):
    return (f"Input: {len(text):,} characters\n"
            f"Output: {len(result):,} characters")

def run(mode, args):
    text = read_input(args.input)
    try:
        options = build_options(args)
    except ValueError as e:
        raise SystemExit(f"error: {e}")
    try:
        result = convert(mode, text, options)
    except ConversionError as e:
        raise SystemExit(f"error: {e}")
    print(result)

    if args.stats:
        print(show_stats(text, result), file=sys.stderr)
    if args.copy:
        notice = copy_to_clipboard(result) if result else "Nothing to copy!"
        print(notice, file=sys.stderr)
    if args.save is not None:
        if result:
            notice = save_to_file(result, args.save or default_filename(mode))
        else:
            notice = "Nothing to download!"
        print(notice, file=sys.stderr)


# ---------- CLI commands ----------
def cmd_convert(args):
    run(CodecMode.parse(args.mode), args)

def cmd_codec(args):
    if args.action == 'encode':
        mode = CodecMode.parse(f"text-to-{args.cmd}")
    else:
        mode = CodecMode.parse(f"{args.cmd}-to-text")
    run(mode, args)

def cmd_modes(args):
    for mode in CodecMode:
        print(f"{mode.value:<16} {mode.hint}")


# ---------- Argument parser ----------
def add_output_flags(p):
    p.add_argument('--copy', action='store_true', help="Copy the result to the clipboard")
    p.add_argument('--save', nargs='?', const='', metavar='PATH',
                   help="Save the result to PATH (default: converted_<target>_<ms>.txt)")
    p.add_argument('--stats', action='store_true', help="Print input/output character counts")

def add_codec_flags(p, codec):
    if codec in ('binary', None):
        p.add_argument('--bits', type=int, choices=BIT_WIDTHS, help="Binary group width")
    if codec in ('hex', None):
        p.add_argument('--case', choices=HEX_CASES, help="Hex letter case")
    if codec in ('emoji', None):
        p.add_argument('--preset', choices=list(EMOJI_PRESETS), help="Emoji preset")

def build_parser():
    p = argparse.ArgumentParser(prog='textconv', description="Text Conversion & Encoding Suite")
    p.add_argument('-v', '--verbose', action='store_true', help="Debug logging")
    p.add_argument('--env-file', help="Read TEXTCONV_* defaults from this .env file")
    sub = p.add_subparsers(dest='cmd', required=True)

    # convert
    c = sub.add_parser('convert', help="Convert INPUT with any supported mode")
    c.add_argument('mode', choices=[m.value for m in CodecMode])
    c.add_argument('input', nargs='?', help="Input text (default: stdin)")
    add_codec_flags(c, None)
    add_output_flags(c)
    c.set_defaults(func=cmd_convert)

    # one shortcut per codec
    for codec in CODECS:
        s = sub.add_parser(codec, help=f"{codec} encoder/decoder")
        s.add_argument('action', choices=['encode', 'decode'])
        s.add_argument('input', nargs='?', help="Input text (default: stdin)")
        add_codec_flags(s, codec)
        add_output_flags(s)
        s.set_defaults(func=cmd_codec)

    # modes
    m = sub.add_parser('modes', help="List supported modes")
    m.set_defaults(func=cmd_modes)

    return p

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    load_env(args.env_file)
    setup_logging(args.verbose)
    args.func(args)

if __name__ == "__main__":
    main()
