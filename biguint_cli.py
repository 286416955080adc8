'''
Command line calculator over BigUint.

    $ echo '100 + 100' | biguint
    200
    $ biguint 100 / 9 --remainder
    11 1

`/` prints the truncated quotient (and the remainder with --remainder),
comparisons print true or false.  Exit status is 1 when the numbers can't
be parsed or the arithmetic fails, 2 for a malformed expression.
'''

import argparse
import logging
import operator
import os
import sys

from biguint import BigUint, BigUintArithmeticError, ParseError

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = 'BIGUINT_LOG_LEVEL'

ARITHMETIC = {
    '+': BigUint.add,
    '-': BigUint.sub,
    '*': BigUint.mul,
    '/': BigUint.div,
    '%': BigUint.rem,
}
COMPARISONS = {
    '==': operator.eq,
    '!=': operator.ne,
    '<': operator.lt,
    '>': operator.gt,
    '<=': operator.le,
    '>=': operator.ge,
}
OPERATORS = [*ARITHMETIC, *COMPARISONS]

def configure_logging(log_level):
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        logger.warning('unknown log level %r, using WARNING', log_level)
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

def build_parser():
    parser = argparse.ArgumentParser(
        prog='biguint',
        description='Evaluate "<value> <operator> <value>" over unsigned integers of any size.',
        epilog='With no expression the first line of standard input is read.',
    )
    parser.add_argument('expression', nargs='*',
                        help=f'value, operator and value; operators: {" ".join(OPERATORS)}')
    parser.add_argument('--remainder', action='store_true',
                        help='for /, print "<quotient> <remainder>"')
    parser.add_argument('--log-level', default=os.environ.get(LOG_LEVEL_ENV, 'WARNING'),
                        help=f'logging level (default: ${LOG_LEVEL_ENV} or WARNING)')
    return parser

def split_expression(line):
    '''[lhs, op, rhs] from a line, or None when it isn't three tokens.'''
    tokens = line.split()
    if len(tokens) != 3:
        return None
    return tokens

def evaluate(lhs_text, op, rhs_text, *, remainder=False):
    '''The result line for one expression.

    Raises ParseError or BigUintArithmeticError, and ValueError for an
    unknown operator.
    '''
    if op not in ARITHMETIC and op not in COMPARISONS:
        raise ValueError(f'unknown operator {op!r}')
    lhs = BigUint.parse(lhs_text)
    rhs = BigUint.parse(rhs_text)
    logger.debug('operands: %d and %d limbs', lhs.limb_count, rhs.limb_count)
    if op in COMPARISONS:
        return 'true' if COMPARISONS[op](lhs, rhs) else 'false'
    if op == '/' and remainder:
        q, r = lhs.div_rem(rhs)
        return f'{q} {r}'
    return str(ARITHMETIC[op](lhs, rhs))

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.expression:
        tokens = args.expression
        if len(tokens) == 1:
            tokens = split_expression(tokens[0])
    else:
        tokens = split_expression(sys.stdin.readline())
    if tokens is None or len(tokens) != 3:
        parser.error('expected "<value> <operator> <value>"')
    lhs_text, op, rhs_text = tokens
    if op not in ARITHMETIC and op not in COMPARISONS:
        parser.error(f'unknown operator {op!r}; expected one of {" ".join(OPERATORS)}')

    try:
        result = evaluate(lhs_text, op, rhs_text, remainder=args.remainder)
    except (ParseError, BigUintArithmeticError) as exc:
        logger.debug('%s %s %s failed', lhs_text, op, rhs_text, exc_info=True)
        print(f'error: {exc}', file=sys.stderr)
        return 1
    print(result)
    return 0

if __name__ == '__main__':
    sys.exit(main())
