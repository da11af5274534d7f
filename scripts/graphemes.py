#!/usr/bin/env python3

"""segment input text into grapheme clusters"""

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from argparse import ArgumentParser
import logging
import os
import sys

from graphemachine import __version__, UNICODE_VERSION
from graphemachine.machine import GraphemeTokenizer
from graphemachine.table import RangeTable, lookup

__author__ = 'Florian Leitner'


def segment(text_iterator, tokenizer, mode, separator):
    for text in text_iterator:
        text = text.rstrip('\n')

        if mode == 'offsets':
            for start, end, *_ in tokenizer.tag(text):
                print(start, end, sep='\t')
        elif mode == 'tag':
            for token in tokenizer.tag(text):
                print(*token, sep='\t')
        else:
            print(*tokenizer.split(text), sep=separator)


epilog = 'Unicode {}; system (default) encoding: {}'.format(
    UNICODE_VERSION, sys.getdefaultencoding()
)
parser = ArgumentParser(
    usage='%(prog)s [options] [FILE ...]',
    description=__doc__, epilog=epilog,
    prog=os.path.basename(sys.argv[0])
)

parser.set_defaults(loglevel=logging.WARNING)
parser.set_defaults(mode='split')
parser.add_argument('files', metavar='FILE', nargs='*',
                    help='input file(s); if absent, read from <STDIN>')
parser.add_argument('--offsets', action='store_const', const='offsets',
                    dest='mode', help='print cluster offsets [split]')
parser.add_argument('--tag', action='store_const', const='tag', dest='mode',
                    help='print offsets, tag, and morphology [split]')
parser.add_argument('--separator', metavar='STR', default='|',
                    help='cluster separator when splitting [%(default)s]')
parser.add_argument('--ucd', metavar='DIR',
                    help='load properties from the UCD files in DIR')
parser.add_argument('--encoding', default='utf-8',
                    help='input file encoding [%(default)s]')
parser.add_argument('--version', action='version', version=__version__)
parser.add_argument('--error', action='store_const', const=logging.ERROR,
                    dest='loglevel', help='error log level only [warn]')
parser.add_argument('--info', action='store_const', const=logging.INFO,
                    dest='loglevel', help='info log level [warn]')
parser.add_argument('--debug', action='store_const', const=logging.DEBUG,
                    dest='loglevel', help='debug log level [warn]')
parser.add_argument('--logfile', metavar='FILE',
                    help='log to file instead of <STDERR>')

args = parser.parse_args()

logging.basicConfig(
    filename=args.logfile, level=args.loglevel,
    format='%(asctime)s %(name)s %(levelname)s: %(message)s'
)

try:
    classifier = RangeTable.from_directory(args.ucd) if args.ucd else lookup
except (OSError, ValueError) as e:
    logging.exception("could not load the UCD files")
    parser.error(str(e))

tokenizer = GraphemeTokenizer(classifier)
files = args.files if args.files else ['-']

for path in files:
    try:
        if path == '-':
            segment(sys.stdin, tokenizer, args.mode, args.separator)
        else:
            with open(path, encoding=args.encoding) as input_stream:
                segment(input_stream, tokenizer, args.mode, args.separator)
    except (OSError, UnicodeError) as e:
        logging.exception("could not segment %s", path)
        parser.error(str(e))
