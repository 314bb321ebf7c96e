#!/usr/bin/env python3

"""
Console demo: read two fractions and an operation, print the result, repeat.

Input is whitespace-separated tokens: n1 d1 n2 d2 op ...
Stops with exit status 1 on an arithmetic error, 0 at end of input.
"""

import argparse
import logging
import sys

from .fraction import Fraction


OPERATIONS = {
    '+': Fraction.add,
    '-': Fraction.subtract,
    '*': Fraction.multiply,
    '/': Fraction.divide,
}


def gen_tokens(infile):
    for line in infile:
        yield from line.split()


def read_fraction(tokens):
    n = int(next(tokens))
    d = int(next(tokens))
    return Fraction(n, d)


def evaluate(a, op, b):
    """Apply operation given by symbol; unknown symbol gives None."""
    func = OPERATIONS.get(op)
    if func is None:
        return None
    return func(a, b)


def run(infile, outfile):
    """Run the demo loop, return exit status."""
    tokens = gen_tokens(infile)
    rounds = 0
    try:
        while True:
            print('Type in two fractions:', file=outfile)
            a = read_fraction(tokens)
            a.print_both(file=outfile)
            b = read_fraction(tokens)
            b.print_both(file=outfile)

            print('Operation to perform (+-*/): ', end='', file=outfile, flush=True)
            op = next(tokens)
            c = evaluate(a, op, b)
            if c is None:
                logging.warning('unknown operation: %r', op)
                print('Unknown operation!', file=outfile)
                c = Fraction(0, 1)
            else:
                logging.info('%s %s %s = %s', a, op, b, c)
            c.print_both(file=outfile)
            print('\n---', file=outfile)
            rounds += 1
    except StopIteration:
        logging.debug('end of input after %d rounds', rounds)
        return 0
    except ArithmeticError as exc:
        logging.error('arithmetic error: %s', exc)
        print('{}: {}'.format(type(exc).__name__, exc), file=outfile)
        return 1
    except ValueError as exc:
        logging.error('bad input: %s', exc)
        print('Invalid input: {}'.format(exc), file=outfile)
        return 2


def main(argv=None):
    argparser = argparse.ArgumentParser(description='Fraction arithmetic console demo.')
    argparser.add_argument('--input', help='read tokens from file instead of stdin')
    argparser.add_argument('--log-level', default='WARNING', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    args = argparser.parse_args(argv)

    logging.basicConfig(level=args.log_level, stream=sys.stderr, format='%(asctime)s %(levelname)s %(message)s')

    if args.input is not None:
        with open(args.input) as fh:
            status = run(fh, sys.stdout)
    else:
        status = run(sys.stdin, sys.stdout)
    sys.exit(status)


if __name__ == "__main__":
    main()
